"""
Game facade for Minesweeper.

GameEngine owns a board, applies player commands through the reveal
and flag rules, and settles the game status after each command.
"""
import logging
import random
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from . import export, flags
from .board import Board, BoardConfig
from .cell import Cell
from .errors import IllegalCommandOnTerminalGame
from .reveal import reveal

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Minesweeper game facade.

    Commands (reveal_cell, toggle_flag, toggle_question) are rejected
    with IllegalCommandOnTerminalGame once the game is won or lost.
    The win and loss predicates are pure functions of the board; the
    status is recomputed from them after every accepted command.
    """

    def __init__(self, board: Board) -> None:
        """
        Initialize the engine.

        Args:
            board: Freshly generated board, owned by the engine from now on.
        """
        self._board = board
        self._status = GameStatus.IN_PROGRESS
        self._first_reveal = board.revealed_count == 0

    @classmethod
    def init(
        cls,
        rows: int,
        cols: int,
        num_mines: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "GameEngine":
        """Start a new game on a randomly mined rows x cols board."""
        return cls.from_config(BoardConfig(rows, cols, num_mines), seed=seed)

    @classmethod
    def from_config(
        cls, config: BoardConfig, seed: Optional[int] = None
    ) -> "GameEngine":
        """Start a new game from a board configuration."""
        return cls(Board(config, rng=random.Random(seed)))

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> bool:
        """
        Reveal a cell, cascading through empty regions.

        Returns:
            True if at least one cell was revealed.

        Raises:
            OutOfBounds: Position is outside the grid.
            IllegalCommandOnTerminalGame: The game is over.
        """
        self._check_command(row, col)
        if self._first_reveal:
            self._protect_first_click(row, col)
        revealed = reveal(self._board, row, col)
        if revealed:
            self._first_reveal = False
        self._settle()
        return bool(revealed)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle a flag on a hidden or flagged cell.

        Returns:
            True if the cell changed.

        Raises:
            OutOfBounds: Position is outside the grid.
            NoFlagsRemaining: Every flag is already placed.
            IllegalCommandOnTerminalGame: The game is over.
        """
        return self._apply(flags.toggle_flag, row, col)

    def toggle_question(self, row: int, col: int) -> bool:
        """
        Toggle a question mark on a hidden or questioned cell.

        Returns:
            True if the cell changed.

        Raises:
            OutOfBounds: Position is outside the grid.
            IllegalCommandOnTerminalGame: The game is over.
        """
        return self._apply(flags.toggle_question, row, col)

    def _apply(
        self, command: Callable[[Board, int, int], bool], row: int, col: int
    ) -> bool:
        self._check_command(row, col)
        changed = command(self._board, row, col)
        self._settle()
        return changed

    def _check_command(self, row: int, col: int) -> None:
        """Validate position and game status before any mutation."""
        self._board.index_of(row, col)
        if self._status != GameStatus.IN_PROGRESS:
            logger.debug("Rejected command on finished game at (%d, %d)",
                         row, col)
            raise IllegalCommandOnTerminalGame(self._status)

    def _protect_first_click(self, row: int, col: int) -> None:
        if not self._board.config.first_click_safe:
            return
        if self._board.cell_at(row, col).is_hidden:
            self._board.relocate_mine(row, col)

    def _settle(self) -> None:
        """Recompute status from the board after a command."""
        if self.is_game_lost():
            self._status = GameStatus.LOST
            logger.info("Game lost")
        elif self.is_game_won():
            self._status = GameStatus.WON
            logger.info("Game won")

    # ========================================================================
    # Status Queries
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Status as of the last command."""
        return self._status

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self._status != GameStatus.IN_PROGRESS

    def is_game_won(self) -> bool:
        """
        Check if the flagged cells are exactly the mined cells.

        A board without mines is won with no flags placed.
        """
        return all(cell.is_flagged == cell.is_mine
                   for cell in self._board.cells())

    def is_game_lost(self) -> bool:
        """
        Check if the game is lost.

        A game is lost if a mine is revealed, or if every flag is placed
        and at least one of them sits on an empty cell.
        """
        mine_revealed = any(cell.is_mine and cell.is_revealed
                            for cell in self._board.cells())
        if mine_revealed:
            return True
        misflagged = any(cell.is_flagged and not cell.is_mine
                         for cell in self._board.cells())
        return self.remaining_flags() == 0 and misflagged

    def remaining_flags(self) -> int:
        """Flags the player can still place."""
        return flags.remaining_flags(self._board)

    def total_mines(self) -> int:
        """Total number of mines on the board."""
        return self._board.total_mines

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._board.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._board.cols

    # ========================================================================
    # Cell Queries
    # ========================================================================

    def cell_at(self, row: int, col: int) -> Cell:
        """Snapshot of a cell."""
        return self._board.cell_at(row, col)

    def is_hidden(self, row: int, col: int) -> bool:
        """Check if a cell is hidden."""
        return self.cell_at(row, col).is_hidden

    def is_revealed(self, row: int, col: int) -> bool:
        """Check if a cell is revealed."""
        return self.cell_at(row, col).is_revealed

    def is_flagged(self, row: int, col: int) -> bool:
        """Check if a cell carries a flag."""
        return self.cell_at(row, col).is_flagged

    def is_questioned(self, row: int, col: int) -> bool:
        """Check if a cell carries a question mark."""
        return self.cell_at(row, col).is_questioned

    def is_mined(self, row: int, col: int) -> bool:
        """Check if a cell holds a mine."""
        return self.cell_at(row, col).is_mine

    def adjacent_mine_count(self, row: int, col: int) -> int:
        """Number of mines among the cell's neighbors."""
        return self.cell_at(row, col).adjacent_mine_count

    def flagged_and_mined(self, row: int, col: int) -> bool:
        """Check if a cell holds a mine and is flagged."""
        cell = self.cell_at(row, col)
        return cell.is_flagged and cell.is_mine

    def unflagged_and_mined(self, row: int, col: int) -> bool:
        """Check if a cell holds a mine and is not flagged."""
        cell = self.cell_at(row, col)
        return not cell.is_flagged and cell.is_mine

    # ========================================================================
    # Bulk Export
    # ========================================================================

    def export_cells(self) -> bytes:
        """Packed state of every cell, three bytes each, row-major."""
        return export.pack_cells(self._board)

    def cell_records(self) -> np.ndarray:
        """State of every cell as a (rows * cols, 3) uint8 array."""
        return export.cell_records(self._board)

    def observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                -3 = questioned
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self._board.positions():
            obs[row, col] = self._board.cell_at(row, col).to_observation()
        return obs

    def render(self) -> str:
        """Player view of the grid."""
        return self._board.render()

    def debug(self) -> str:
        """Content view of the grid, mines included."""
        return self._board.debug()
