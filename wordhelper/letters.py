import collections
import enum

from .results import SearchResult
from .utils import clean_letters

import logging
logger = logging.getLogger()

# standard scrabble tile values
SCORES = {
    **dict.fromkeys('AEIOULNSTR', 1),
    **dict.fromkeys('DG', 2),
    **dict.fromkeys('BCMP', 3),
    **dict.fromkeys('FHVWY', 4),
    'K': 5,
    **dict.fromkeys('JX', 8),
    **dict.fromkeys('QZ', 10),
}


def word_score(word, blanks=()):
    """
    sum of the tile values, letters at the blanks indices are worth nothing
    """
    return sum([
        SCORES.get(c, 0) for i, c in enumerate(word) if i not in blanks
    ])


class Anchor(enum.Enum):

    BEGINNING = 'beginning'
    MIDDLE    = 'middle'
    END       = 'end'


class Tiles:
    """
    the letters on the rack, blank tiles counted separately
    """

    BLANKS = '.?'

    def __init__(self, letters='', blanks=0):
        self.letters = collections.Counter(clean_letters(letters))
        self.blanks = blanks

    @classmethod
    def parse(cls, text):
        """
        'deroibu.' -> D E R O I B U + one blank
        """
        text = text or ''
        blanks = sum([1 for c in text if c in cls.BLANKS])
        return cls(clean_letters(text), blanks)

    @property
    def is_empty(self):
        return not self.letters and not self.blanks

    def __len__(self):
        return sum(self.letters.values()) + self.blanks

    def __repr__(self):
        letters = ''.join(sorted(self.letters.elements()))
        return f"<{self.__class__.__name__} {letters}{'.' * self.blanks}>"


class ScoredWord(collections.namedtuple('ScoredWord', 'word score blanks')):
    """
    a match in letters mode

    blanks holds the indices into word that had to be made from blank tiles
    """

    __slots__ = ()

    @property
    def blank_letters(self):
        return [self.word[i] for i in self.blanks]


class AnagramMatcher:
    """
    letters mode, find every word that can be built from the tiles,
    optionally around some fixed letters already on the board
    """

    def __init__(self, dictionary):
        self.dictionary = dictionary

    @staticmethod
    def remainder(word, fixed, anchor):
        """
        indices of the letters in word that have to come from the tiles once
        the fixed letters are accounted for, None if fixed doesn't fit

        middle means strictly inside the word, touching neither end. the first
        such spot from the left wins.
        eg. crowd, ow, middle -> [0, 1, 4] (C R D)
        """
        indices = list(range(len(word)))

        if not fixed:
            return indices

        n = len(fixed)

        if anchor == Anchor.BEGINNING:
            if not word.startswith(fixed):
                return None
            return indices[n:]

        if anchor == Anchor.END:
            if not word.endswith(fixed):
                return None
            return indices[:len(word) - n]

        for i in range(1, len(word) - n):
            if word[i:i + n] == fixed:
                return indices[:i] + indices[i + n:]

        return None

    @staticmethod
    def consume(word, indices, tiles):
        """
        take a tile for every letter at indices, falling back on a blank when
        we run out of a letter

        returns the indices covered by blanks, None if the tiles can't make it
        """
        letters = collections.Counter(tiles.letters)
        blanks = tiles.blanks
        covered = []

        for i in indices:
            c = word[i]

            if letters[c] > 0:
                letters[c] -= 1
            elif blanks > 0:
                blanks -= 1
                covered.append(i)
            else:
                return None

        return covered

    def match(self, tiles, fixed='', anchor=Anchor.BEGINNING):
        """
        return ScoredWords, best score first, ties in alphabetical order
        """
        if not isinstance(tiles, Tiles):
            tiles = Tiles.parse(tiles)

        fixed = clean_letters(fixed)
        # anchor only matters with fixed letters
        anchor = Anchor(anchor) if fixed and anchor else Anchor.BEGINNING

        if tiles.is_empty and not fixed:
            return SearchResult.not_searched()

        matches = []

        for word in self.dictionary:
            indices = self.remainder(word, fixed, anchor)
            if indices is None:
                continue

            covered = self.consume(word, indices, tiles)
            if covered is None:
                continue

            covered = tuple(covered)
            matches.append(ScoredWord(word, word_score(word, covered), covered))

        logger.debug(f"tiles={tiles} fixed={fixed} at={anchor.value}: {len(matches)} matches")

        # sort on (-score, word) so ties come out alphabetically
        matches = sorted(matches, key=lambda item: (-item.score, item.word))
        return SearchResult.of(matches)
