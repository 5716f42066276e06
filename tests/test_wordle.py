"""
Tests for wordle mode: the grid model, turning it into constraints and
filtering words with them.
"""

import pytest

from wordhelper.dictionary import Dictionary
from wordhelper.results import SearchStatus
from wordhelper.wordle import (
    ConstraintMatcher, WordleConstraints, Grid, Tile, TileState, derive_constraints,
)


@pytest.fixture
def matcher(dictionary):
    return ConstraintMatcher(dictionary)


class TestGrid:

    def test_state_cycle(self):
        assert TileState.EMPTY.next() == TileState.GREEN
        assert TileState.GREEN.next() == TileState.YELLOW
        assert TileState.YELLOW.next() == TileState.GRAY
        assert TileState.GRAY.next() == TileState.EMPTY

    def test_type_letter_turns_green_and_advances(self):
        grid = Grid()
        grid.type_letter('c')

        assert grid[0][0] == Tile('C', TileState.GREEN)
        assert grid.active == (0, 1)

    def test_type_letter_keeps_state(self):
        grid = Grid()
        grid.type_letter('c')
        grid.tap(0, 0)
        grid.type_letter('d')

        assert grid[0][0] == Tile('D', TileState.YELLOW)

    def test_type_letter_wraps_to_next_row(self):
        grid = Grid()
        for c in 'CRANE':
            grid.type_letter(c)

        assert grid.active == (1, 0)

    def test_type_letter_stops_at_last_cell(self):
        grid = Grid(rows=1, wordlen=2)
        for c in 'ABC':
            grid.type_letter(c)

        assert grid.active == (0, 1)
        assert [t.letter for t in grid[0]] == ['A', 'C']

    def test_backspace_clears_active(self):
        grid = Grid()
        grid.type_letter('C')
        grid.tap(0, 0)
        grid.backspace()

        assert grid[0][0] == Tile()
        assert grid.active == (0, 0)

    def test_backspace_moves_back(self):
        grid = Grid()
        grid.type_letter('C')
        grid.type_letter('R')
        grid.backspace()

        assert grid.active == (0, 1)
        assert grid[0][1] == Tile()
        assert grid[0][0].letter == 'C'

    def test_backspace_at_row_start_does_nothing(self):
        grid = Grid()
        grid.backspace()
        assert grid.active == (0, 0)

    def test_tap_empty_tile_keeps_state(self):
        grid = Grid()
        grid.tap(2, 3)

        assert grid.active == (2, 3)
        assert grid[2][3].state == TileState.EMPTY

    def test_next_row_wraps(self):
        grid = Grid(rows=2)
        grid.next_row()
        assert grid.active == (1, 0)
        grid.next_row()
        assert grid.active == (0, 0)

    def test_enter(self):
        grid = Grid()
        grid.enter(0, 'crane', 'oieoo')

        assert [t.letter for t in grid[0]] == list('CRANE')
        assert [t.state for t in grid[0]] == [
            TileState.GRAY, TileState.YELLOW, TileState.GREEN, TileState.GRAY, TileState.GRAY,
        ]

    @pytest.mark.parametrize('guess,resp', [
        ('cran', 'oieoo'),
        ('crane', 'oie'),
        ('crane', 'oiexo'),
        ('cr4ne', 'ooooo'),
    ])
    def test_enter_rejects_bad_input(self, guess, resp):
        with pytest.raises(ValueError):
            Grid().enter(0, guess, resp)

    def test_has_letters_and_reset(self):
        grid = Grid()
        assert not grid.has_letters

        grid.type_letter('A')
        assert grid.has_letters

        grid.reset()
        assert not grid.has_letters
        assert grid.active == (0, 0)


class TestDeriveConstraints:

    def test_colours(self):
        grid = Grid()
        grid.enter(0, 'crane', 'oieoo')
        constraints = derive_constraints(grid)

        assert constraints.fixed == {2: 'A'}
        assert constraints.misplaced == {1: {'R'}}
        assert constraints.required == {'A', 'R'}
        assert constraints.excluded == {'C', 'N', 'E'}

    def test_rows_accumulate(self):
        grid = Grid()
        grid.enter(0, 'crane', 'oieoo')
        grid.enter(1, 'rival', 'ioooo')
        constraints = derive_constraints(grid)

        assert constraints.fixed == {2: 'A'}
        assert constraints.misplaced == {0: {'R'}, 1: {'R'}}
        assert constraints.excluded == {'C', 'N', 'E', 'I', 'V', 'L'}

    def test_gray_duplicate_of_green_is_not_excluded(self):
        """Green L at 0 plus gray L at 2 leaves L required, not excluded."""
        grid = Grid()
        grid.enter(0, 'lolly', 'eoooo')
        constraints = derive_constraints(grid)

        assert constraints.fixed == {0: 'L'}
        assert 'L' in constraints.required
        assert constraints.excluded == {'O', 'Y'}

    def test_gray_duplicate_of_yellow_is_not_excluded(self):
        grid = Grid()
        grid.enter(0, 'geese', 'oiooo')

        assert derive_constraints(grid).excluded == {'G', 'S'}

    def test_letter_without_colour_ignored(self):
        rows = [[Tile('A'), Tile('B', TileState.GRAY)]]
        assert derive_constraints(rows) == WordleConstraints(excluded={'B'})

    def test_empty_grid(self):
        assert derive_constraints(Grid()).is_empty


class TestConstraintMatcher:

    def test_duplicate_letter_disambiguation(self, matcher):
        """LLAMA has two L's and must survive a gray second L."""
        grid = Grid()
        grid.enter(0, 'lolly', 'eoooo')
        result = matcher.solve(grid)

        assert result.words == ('LILAC', 'LLAMA')

    def test_fixed(self, matcher):
        constraints = WordleConstraints(fixed={0: 'C'}, required={'C'})
        assert matcher.match(constraints).words == ('CRANE', 'CROWD')

    def test_misplaced_present_but_elsewhere(self, matcher):
        constraints = WordleConstraints(misplaced={1: {'R'}}, required={'R'})
        # BREAD, CRANE and CROWD have R at 1
        assert matcher.match(constraints).words == ('BEARD', 'ROBED')

    def test_excluded(self, matcher):
        constraints = WordleConstraints(excluded={'A', 'E'})
        assert matcher.match(constraints).words == ('BROWN', 'CROWD', 'LOLLY')

    def test_required(self, matcher):
        constraints = WordleConstraints(required={'W'})
        assert matcher.match(constraints).words == ('BROWN', 'CROWD')

    def test_length_filter(self, matcher):
        constraints = WordleConstraints(excluded={'Z'})

        for wordlen in (3, 4, 5):
            result = matcher.match(constraints, wordlen)
            assert result
            assert all([len(word) == wordlen for word in result])

    def test_letter_counts_not_modelled(self, matcher):
        """
        Known limitation: a gray E next to a green E doesn't cap the number
        of E's, so PIECE still matches after THEME -> ooooe.
        """
        grid = Grid()
        grid.enter(0, 'theme', 'ooooe')
        result = matcher.solve(grid)

        assert 'PIECE' in result.words

    def test_out_of_range_positions_reject_quietly(self, matcher):
        constraints = WordleConstraints(fixed={7: 'A'}, misplaced={9: {'C'}})
        assert matcher.match(constraints).status == SearchStatus.EMPTY

    def test_empty_grid_not_searched(self, matcher):
        result = matcher.solve(Grid())

        assert result.status == SearchStatus.NOT_SEARCHED
        assert result.words == ()

    def test_empty_constraints_not_searched(self, matcher):
        assert matcher.match(WordleConstraints()).status == SearchStatus.NOT_SEARCHED

    def test_zero_matches_searched_empty(self, matcher):
        constraints = WordleConstraints(fixed={0: 'Q'}, required={'Q'})
        result = matcher.match(constraints)

        assert result.status == SearchStatus.EMPTY
        assert result.searched

    def test_sorted(self):
        matcher = ConstraintMatcher(Dictionary(['SLATE', 'CRANE', 'BRAVE']))
        constraints = WordleConstraints(fixed={4: 'E'}, required={'E'})

        assert matcher.match(constraints).words == ('BRAVE', 'CRANE', 'SLATE')

    def test_idempotent(self, matcher):
        grid = Grid()
        grid.enter(0, 'crane', 'oieoo')

        assert matcher.solve(grid) == matcher.solve(grid)
