import enum

from .results import SearchResult

import logging
logger = logging.getLogger()


class TileState(enum.Enum):

    EMPTY  = 'empty'
    GREEN  = 'green'  # exact spot
    YELLOW = 'yellow' # in word but wrong spot
    GRAY   = 'gray'   # not in word

    def next(self):
        """
        tapping a tile cycles empty -> green -> yellow -> gray -> empty
        """
        order = list(TileState)
        return order[(order.index(self) + 1) % len(order)]


class Tile:

    def __init__(self, letter='', state=TileState.EMPTY):
        self.letter = letter
        self.state = state

    def clear(self):
        self.letter = ''
        self.state = TileState.EMPTY

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented

        return (self.letter, self.state) == (other.letter, other.state)

    def __repr__(self):
        return f"<Tile {self.letter or '-'} {self.state.value}>"


class Grid:
    """
    the board of guesses the user is filling in

    only holds letters and colours, turning it into something we can
    match against is derive_constraints' job
    """

    LETTER_IN    = 'i' # in, in word but wrong spot
    LETTER_OUT   = 'o' # out, not in word
    LETTER_EXACT = 'e' # exact spot

    RESPONSE_STATES = {
        LETTER_IN:    TileState.YELLOW,
        LETTER_OUT:   TileState.GRAY,
        LETTER_EXACT: TileState.GREEN,
    }

    def __init__(self, rows=6, wordlen=5):
        self.nrows = rows
        self.wordlen = wordlen
        self.reset()

    @classmethod
    def response_set(cls):
        return set(cls.RESPONSE_STATES)

    def reset(self):
        self.rows = [
            [Tile() for _ in range(self.wordlen)]
            for _ in range(self.nrows)
        ]
        self.active = (0, 0)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, row):
        return self.rows[row]

    @property
    def has_letters(self):
        return any([tile.letter for row in self.rows for tile in row])

    @property
    def active_tile(self):
        row, col = self.active
        return self.rows[row][col]

    def advance(self):
        row, col = self.active

        if col < self.wordlen - 1:
            self.active = (row, col + 1)
        elif row < self.nrows - 1:
            self.active = (row + 1, 0)

    def type_letter(self, letter):
        tile = self.active_tile
        tile.letter = letter.upper()

        if tile.state == TileState.EMPTY:
            tile.state = TileState.GREEN

        self.advance()

    def backspace(self):
        row, col = self.active

        if self.active_tile.letter:
            self.active_tile.clear()
        elif col > 0:
            self.rows[row][col - 1].clear()
            self.active = (row, col - 1)

    def tap(self, row, col):
        self.active = (row, col)
        tile = self.rows[row][col]

        if tile.letter:
            tile.state = tile.state.next()

    def next_row(self):
        row, _ = self.active
        self.active = ((row + 1) % self.nrows, 0)

    def enter(self, row, guess, resp):
        """
        fill a whole row from a guess and its response
        eg. enter(0, 'crane', 'oieoo')
        """
        if not all([
            len(guess) == self.wordlen,
            len(resp) == self.wordlen,
        ]):
            raise ValueError(f"guess and response must be {self.wordlen} letters: {guess!r}, {resp!r}")

        if not set(resp) <= self.response_set():
            raise ValueError(f"invalid response {resp!r}, must be made of {''.join(sorted(self.response_set()))}")

        if not guess.isalpha():
            raise ValueError(f"invalid guess {guess!r}, letters only")

        for tile, c, r in zip(self.rows[row], guess.upper(), resp):
            tile.letter = c
            tile.state = self.RESPONSE_STATES[r]


class WordleConstraints:

    def __init__(self, fixed=None, misplaced=None, required=None, excluded=None):
        self.fixed = dict(fixed or {})                  # pos -> letter
        self.misplaced = {
            pos: set(letters) for pos, letters in (misplaced or {}).items()
        }                                               # pos -> {letters}
        self.required = set(required or ())
        self.excluded = set(excluded or ())

    @property
    def is_empty(self):
        return not any([self.fixed, self.misplaced, self.required, self.excluded])

    def __eq__(self, other):
        if not isinstance(other, WordleConstraints):
            return NotImplemented

        return vars(self) == vars(other)

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} fixed={self.fixed} misplaced={self.misplaced} "
            f"required={sorted(self.required)} excluded={sorted(self.excluded)}>"
        )


def derive_constraints(rows):
    """
    scan every filled in tile and build the constraints

    a letter that's gray in one spot but green or yellow in another is
    in the word, so it's dropped from the excludes.
    eg. word: llama, guess: lolly -> green l, gray second l
    """
    constraints = WordleConstraints()

    for row in rows:
        for pos, tile in enumerate(row):
            c = tile.letter

            if not c:
                continue

            if tile.state == TileState.GREEN:
                constraints.fixed[pos] = c
                constraints.required.add(c)

            elif tile.state == TileState.YELLOW:
                constraints.misplaced.setdefault(pos, set()).add(c)
                constraints.required.add(c)

            elif tile.state == TileState.GRAY:
                constraints.excluded.add(c)

    constraints.excluded -= constraints.required
    return constraints


class ConstraintMatcher:
    """
    wordle mode, filter the dictionary down to words that fit the greens,
    yellows and grays seen so far

    NOTE: letter counts aren't tracked, a single green 'e' doesn't rule out
    words with two e's.
    """

    def __init__(self, dictionary):
        self.dictionary = dictionary

    @staticmethod
    def check_word(word, constraints):
        for pos, c in constraints.fixed.items():
            if pos >= len(word) or word[pos] != c:
                return False

        for pos, letters in constraints.misplaced.items():
            for c in letters:
                if c not in word or (pos < len(word) and word[pos] == c):
                    return False

        for c in constraints.required:
            if c not in word:
                return False

        for c in constraints.excluded:
            if c in word:
                return False

        return True

    def find_matches(self, constraints, wordlen):
        matches = [
            word for word in self.dictionary.of_length(wordlen)
            if self.check_word(word, constraints)
        ]

        logger.debug(f"{constraints}: {len(matches)} matches")
        return SearchResult.of(sorted(matches))

    def match(self, constraints, wordlen=5):
        if constraints.is_empty:
            return SearchResult.not_searched()

        return self.find_matches(constraints, wordlen)

    def solve(self, grid):
        """
        constraints straight from a grid, nothing typed in means nothing searched
        """
        if not grid.has_letters:
            return SearchResult.not_searched()

        return self.find_matches(derive_constraints(grid), grid.wordlen)
