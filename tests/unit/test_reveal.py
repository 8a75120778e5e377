"""
Unit tests for the cascading reveal.

Tests single reveals, flood fill extent, protection of marked cells
and single visitation.
"""
import random

import pytest
from minesweeper.game import Board, CellVisibility, OutOfBounds
from minesweeper.game.reveal import reveal


def revealed_positions(board: Board):
    return {
        (row, col) for row, col in board.positions()
        if board.cell_at(row, col).is_revealed
    }


# ============================================================================
# Single Reveal Tests
# ============================================================================

class TestReveal:
    """Test revealing a single cell."""

    def test_reveal_numbered_cell_does_not_cascade(
        self, center_mine_board: Board
    ) -> None:
        """Cells next to a mine stop the cascade."""
        result = reveal(center_mine_board, 0, 0)
        assert result == [(0, 0)]
        assert revealed_positions(center_mine_board) == {(0, 0)}
        assert center_mine_board.cell_at(0, 0).adjacent_mine_count == 1

    def test_reveal_mine_marks_it_revealed(
        self, center_mine_board: Board
    ) -> None:
        """A mine is revealed like any other cell."""
        result = reveal(center_mine_board, 1, 1)
        assert result == [(1, 1)]
        assert center_mine_board.cell_at(1, 1).is_revealed is True

    def test_reveal_twice_is_noop(self, center_mine_board: Board) -> None:
        """Revealing a revealed cell changes nothing."""
        reveal(center_mine_board, 0, 0)
        assert reveal(center_mine_board, 0, 0) == []
        assert center_mine_board.revealed_count == 1

    @pytest.mark.parametrize(
        "visibility", [CellVisibility.FLAGGED, CellVisibility.QUESTIONED]
    )
    def test_marked_cell_is_protected(
        self, empty_board: Board, visibility: CellVisibility
    ) -> None:
        """Flagged and questioned cells are not revealed."""
        empty_board.set_visibility(2, 2, visibility)
        assert reveal(empty_board, 2, 2) == []
        assert empty_board.cell_at(2, 2).visibility == visibility

    def test_reveal_out_of_bounds(self, empty_board: Board) -> None:
        """Off-grid coordinates raise and reveal nothing."""
        with pytest.raises(OutOfBounds):
            reveal(empty_board, 5, 0)
        assert empty_board.revealed_count == 0


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test flood fill through lone cells."""

    def test_empty_board_reveals_everything(self, empty_board: Board) -> None:
        """With no mines every cell opens."""
        result = reveal(empty_board, 2, 2)
        assert len(result) == 25
        assert all(cell.is_revealed for cell in empty_board.cells())

    def test_single_cell_board(self) -> None:
        """A 1x1 board without mines reveals its only cell."""
        board = Board.with_mines(1, 1, [])
        assert reveal(board, 0, 0) == [(0, 0)]
        assert board.cell_at(0, 0).adjacent_mine_count == 0

    def test_cascade_opens_all_but_corner_mine(
        self, corner_mine_board: Board
    ) -> None:
        """Cascade reaches every safe cell around a corner mine."""
        reveal(corner_mine_board, 0, 0)
        hidden = {
            (row, col) for row, col in corner_mine_board.positions()
            if corner_mine_board.cell_at(row, col).is_hidden
        }
        assert hidden == {(4, 4)}

    def test_cascade_stops_at_numbered_border(self) -> None:
        """A wall of mines confines the cascade to its side."""
        board = Board.with_mines(5, 5, [(0, 2), (1, 2), (2, 2), (3, 2), (4, 2)])
        reveal(board, 0, 0)

        opened = revealed_positions(board)
        assert opened == {(row, col) for row in range(5) for col in (0, 1)}

    def test_cascade_skips_flagged_neighbors(
        self, empty_board: Board
    ) -> None:
        """Flags inside the cascade region stay in place."""
        empty_board.set_visibility(0, 0, CellVisibility.FLAGGED)
        result = reveal(empty_board, 4, 4)

        assert (0, 0) not in result
        assert empty_board.cell_at(0, 0).is_flagged is True
        assert len(result) == 24

    def test_flagged_cell_splits_region(self) -> None:
        """A flagged lone cell does not pass the cascade on."""
        board = Board.with_mines(1, 5, [])
        board.set_visibility(0, 2, CellVisibility.FLAGGED)
        reveal(board, 0, 0)
        assert revealed_positions(board) == {(0, 0), (0, 1)}

    @pytest.mark.parametrize("seed", range(15))
    def test_each_cell_revealed_at_most_once(self, seed: int) -> None:
        """Reveal lists have no duplicates and stay within the grid."""
        rng = random.Random(seed)
        rows, cols = rng.randint(1, 20), rng.randint(1, 20)
        board = Board.init(rows, cols, rng.randint(0, rows * cols // 5), rng=rng)
        row, col = rng.randrange(rows), rng.randrange(cols)

        result = reveal(board, row, col)

        assert len(result) == len(set(result))
        assert len(result) <= rows * cols
        assert set(result) == revealed_positions(board)
        assert board.revealed_count == len(result)

    def test_large_board_does_not_recurse(self) -> None:
        """Cascade over a large open board completes."""
        board = Board.with_mines(300, 300, [])
        result = reveal(board, 150, 150)
        assert len(result) == 90000
