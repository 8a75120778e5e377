"""
Minesweeper game module.

Provides core game logic including board management, cell state,
reveal and flag rules, and the GameEngine facade.
"""
from .cell import Cell, CellKind, CellVisibility
from .board import (
    Board,
    BoardConfig,
    DEFAULT_MINE_DENSITY,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .engine import GameEngine, GameStatus
from .errors import (
    MinesweeperError,
    InvalidDimensions,
    InvalidMineCount,
    OutOfBounds,
    NoFlagsRemaining,
    IllegalCommandOnTerminalGame,
)
from .export import CELL_RECORD_SIZE, cell_records, pack_cells, unpack_cells
from .environment import Command, MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "CellVisibility",
    "Board",
    "BoardConfig",
    "DEFAULT_MINE_DENSITY",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "GameEngine",
    "GameStatus",
    "MinesweeperError",
    "InvalidDimensions",
    "InvalidMineCount",
    "OutOfBounds",
    "NoFlagsRemaining",
    "IllegalCommandOnTerminalGame",
    "CELL_RECORD_SIZE",
    "cell_records",
    "pack_cells",
    "unpack_cells",
    "Command",
    "MinesweeperEnv",
]
