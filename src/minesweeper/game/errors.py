"""
Exceptions raised by the Minesweeper engine.

Every error derives from MinesweeperError. Where a builtin exception
describes the same failure, the error subclasses it too.
"""
from typing import Any


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(MinesweeperError, ValueError):
    """Board rows or columns are not positive."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(
            f"Board dimensions must be positive (got {rows}x{cols})"
        )
        self.rows = rows
        self.cols = cols


class InvalidMineCount(MinesweeperError, ValueError):
    """Mine count or density does not fit the board."""


class OutOfBounds(MinesweeperError, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} grid"
        )
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class NoFlagsRemaining(MinesweeperError):
    """All flags are already placed."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"No flags remaining to place on ({row}, {col})")
        self.row = row
        self.col = col


class IllegalCommandOnTerminalGame(MinesweeperError):
    """A mutating command was issued after the game ended."""

    def __init__(self, status: Any) -> None:
        name = getattr(status, "name", status)
        super().__init__(f"Game is over ({name}); start a new game")
        self.status = status
