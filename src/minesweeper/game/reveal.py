"""
Cascading reveal for Minesweeper.

Revealing a lone cell (empty, no adjacent mines) opens its whole
connected region of lone cells plus the numbered cells bordering it.
"""
from typing import List, Tuple

from .board import Board
from .cell import CellVisibility


def reveal(board: Board, row: int, col: int) -> List[Tuple[int, int]]:
    """
    Reveal a cell and cascade through lone cells.

    Only hidden cells are revealed; flagged and questioned cells are
    left alone, both as the target and during the cascade. A mine is
    revealed like any other cell.

    Args:
        board: Board to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Positions newly revealed, in reveal order. Empty if the target
        was not hidden.

    Raises:
        OutOfBounds: Position is outside the grid.
    """
    if not board.cell_at(row, col).is_hidden:
        return []

    board.set_visibility(row, col, CellVisibility.REVEALED)
    revealed = [(row, col)]
    pending = [(row, col)]

    while pending:
        current_row, current_col = pending.pop()
        if not board.cell_at(current_row, current_col).is_lone:
            continue
        for neighbor_row, neighbor_col in board.neighbors(
            current_row, current_col
        ):
            if not board.cell_at(neighbor_row, neighbor_col).is_hidden:
                continue
            # Marked before pushing so no cell is queued twice
            board.set_visibility(
                neighbor_row, neighbor_col, CellVisibility.REVEALED
            )
            revealed.append((neighbor_row, neighbor_col))
            pending.append((neighbor_row, neighbor_col))

    return revealed
