"""
Flag and question marking for Minesweeper.

The number of flags available equals the number of mines. Flags in
use are counted by the board, so the remaining count is always
derived, never stored.
"""
import logging

from .board import Board
from .cell import CellVisibility
from .errors import NoFlagsRemaining

logger = logging.getLogger(__name__)


def remaining_flags(board: Board) -> int:
    """Flags the player can still place."""
    return board.total_mines - board.flagged_count


def toggle_flag(board: Board, row: int, col: int) -> bool:
    """
    Toggle a flag on a cell.

    Hidden cells become flagged and flagged cells hidden again.
    Revealed and questioned cells are left unchanged.

    Returns:
        True if the cell changed, False otherwise.

    Raises:
        OutOfBounds: Position is outside the grid.
        NoFlagsRemaining: The cell is hidden and every flag is placed.
    """
    cell = board.cell_at(row, col)
    if cell.is_flagged:
        board.set_visibility(row, col, CellVisibility.HIDDEN)
        return True
    if not cell.is_hidden:
        return False
    if remaining_flags(board) == 0:
        logger.debug("No flags left for (%d, %d)", row, col)
        raise NoFlagsRemaining(row, col)
    board.set_visibility(row, col, CellVisibility.FLAGGED)
    return True


def toggle_question(board: Board, row: int, col: int) -> bool:
    """
    Toggle a question mark on a cell.

    Hidden cells become questioned and questioned cells hidden again.
    Revealed and flagged cells are left unchanged.

    Returns:
        True if the cell changed, False otherwise.

    Raises:
        OutOfBounds: Position is outside the grid.
    """
    cell = board.cell_at(row, col)
    if cell.is_questioned:
        board.set_visibility(row, col, CellVisibility.HIDDEN)
        return True
    if not cell.is_hidden:
        return False
    board.set_visibility(row, col, CellVisibility.QUESTIONED)
    return True
