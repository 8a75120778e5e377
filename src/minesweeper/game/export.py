"""
Bulk export of board state.

Each cell is packed as three bytes in row-major order:
visibility code, kind code, adjacent mine count. The codes are the
values of CellVisibility and CellKind.
"""
from typing import List

import numpy as np

from .board import Board
from .cell import Cell, CellKind, CellVisibility


CELL_RECORD_SIZE = 3


def cell_records(board: Board) -> np.ndarray:
    """
    Get board state as a numpy record array.

    Returns:
        uint8 array of shape (rows * cols, 3) with columns
        visibility, kind, adjacent mine count.
    """
    records = np.zeros(
        (board.rows * board.cols, CELL_RECORD_SIZE), dtype=np.uint8
    )
    for index, cell in enumerate(board.cells()):
        records[index] = (cell.visibility, cell.kind, cell.adjacent_mine_count)
    return records


def pack_cells(board: Board) -> bytes:
    """Board state as rows * cols * 3 bytes."""
    return cell_records(board).tobytes()


def unpack_cells(data: bytes, rows: int, cols: int) -> List[Cell]:
    """
    Decode packed cell records.

    Args:
        data: Bytes produced by pack_cells.
        rows: Number of rows of the exported board.
        cols: Number of columns of the exported board.

    Returns:
        Cells in row-major order.

    Raises:
        ValueError: Length does not match the grid or a code is unknown.
    """
    expected = rows * cols * CELL_RECORD_SIZE
    if len(data) != expected:
        raise ValueError(
            f"Expected {expected} bytes for a {rows}x{cols} grid, "
            f"got {len(data)}"
        )
    records = np.frombuffer(data, dtype=np.uint8).reshape(-1, CELL_RECORD_SIZE)
    return [
        Cell(
            kind=CellKind(int(kind)),
            visibility=CellVisibility(int(visibility)),
            adjacent_mine_count=int(count),
        )
        for visibility, kind, count in records
    ]
