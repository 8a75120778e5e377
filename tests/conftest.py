"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src and the repo root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, Cell, CellKind, GameEngine


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board at default density."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def beginner_board() -> Board:
    """Create a beginner difficulty board."""
    return Board(BoardConfig(9, 9, 10), rng=random.Random(1234))


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.with_mines(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    Create a 5x5 board with one mine in the bottom-right corner.

    Revealing the top-left corner opens everything except the mine.
    """
    return Board.with_mines(5, 5, [(4, 4)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.with_mines(5, 5, [])


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def center_mine_game(center_mine_board: Board) -> GameEngine:
    """Game on a 3x3 board with a single mine in the middle."""
    return GameEngine(center_mine_board)


@pytest.fixture
def two_mine_game() -> GameEngine:
    """Game on a 4x4 board with mines at (0, 0) and (3, 3)."""
    return GameEngine(Board.with_mines(4, 4, [(0, 0), (3, 3)]))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellKind.MINE)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration for environment tests."""
    return BoardConfig(4, 4, 2)
