"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counts,
index-safe cell access and the single visibility mutator used by
the reveal and flag rules.
"""
import logging
import math
import random
from dataclasses import InitVar, dataclass, field, replace
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from .cell import Cell, CellKind, CellVisibility
from .errors import InvalidDimensions, InvalidMineCount, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Share of cells holding a mine when no explicit count is given
DEFAULT_MINE_DENSITY = 0.15


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place, or None to derive it from
            mine_density.
        mine_density: Fraction of cells mined when num_mines is None.
        first_click_safe: Move a mine away from the first revealed cell.
    """

    rows: int = 9
    cols: int = 9
    num_mines: Optional[int] = None
    mine_density: float = DEFAULT_MINE_DENSITY
    first_click_safe: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidDimensions(self.rows, self.cols)
        if not 0.0 <= self.mine_density < 1.0:
            raise InvalidMineCount("Mine density must be in [0, 1)")
        if self.num_mines is None:
            return
        if self.num_mines < 0:
            raise InvalidMineCount("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise InvalidMineCount(f"Too many mines (max {self.max_mines})")

    @property
    def cell_count(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def max_mines(self) -> int:
        """At least one cell is always mine-free."""
        return self.cell_count - 1

    @property
    def total_mines(self) -> int:
        """Mine count after resolving the density default."""
        if self.num_mines is not None:
            return self.num_mines
        derived = int(math.floor(self.cell_count * self.mine_density + 0.5))
        return min(derived, self.max_mines)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Holds rows x cols cells in row-major order. Mines are placed and
    adjacency counts computed once at construction; afterwards only
    cell visibility changes, through set_visibility.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    mines: InitVar[Optional[Iterable[Tuple[int, int]]]] = None
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _flagged_count: int = field(default=0, init=False)
    _revealed_count: int = field(default=0, init=False)

    def __post_init__(
        self, mines: Optional[Iterable[Tuple[int, int]]]
    ) -> None:
        """Place mines and compute adjacency after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        if mines is None:
            mine_indices = self._pick_mine_indices()
        else:
            mine_indices = {self.index_of(row, col) for row, col in mines}
            if len(mine_indices) != self.config.total_mines:
                raise InvalidMineCount(
                    f"Board has {len(mine_indices)} mines but config "
                    f"expects {self.config.total_mines}"
                )
        self._init_grid(mine_indices)
        logger.debug(
            "Generated %dx%d board with %d mines",
            self.rows, self.cols, len(mine_indices),
        )

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def init(
        cls,
        rows: int,
        cols: int,
        num_mines: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a randomly mined rows x cols board."""
        return cls(BoardConfig(rows, cols, num_mines), rng=rng)

    @classmethod
    def with_mines(
        cls,
        rows: int,
        cols: int,
        mines: Iterable[Tuple[int, int]],
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with mines at exactly the given positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mines: (row, col) positions of the mines; duplicates collapse.
            rng: Random source, only used if a mine is later relocated.

        Raises:
            InvalidDimensions: rows or cols is not positive.
            InvalidMineCount: every cell would hold a mine.
            OutOfBounds: a mine position is outside the grid.
        """
        positions = set(mines)
        config = BoardConfig(rows, cols, len(positions))
        return cls(config, rng=rng, mines=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _pick_mine_indices(self) -> Set[int]:
        """Choose mine positions uniformly without replacement."""
        return set(
            self.rng.sample(range(self.config.cell_count),
                            self.config.total_mines)
        )

    def _init_grid(self, mine_indices: Set[int]) -> None:
        """Create the grid with mines and their adjacency counts."""
        kinds = [
            CellKind.MINE if index in mine_indices else CellKind.EMPTY
            for index in range(self.config.cell_count)
        ]
        self._cells = [
            Cell(kind=kind, adjacent_mine_count=self._count_adjacent(kinds, index))
            for index, kind in enumerate(kinds)
        ]
        self._flagged_count = 0
        self._revealed_count = 0

    def _count_adjacent(self, kinds: List[CellKind], index: int) -> int:
        """Count mines adjacent to the cell at a flat index."""
        row, col = divmod(index, self.cols)
        count = 0
        for neighbor_row, neighbor_col in self._neighbor_positions(row, col):
            if kinds[neighbor_row * self.cols + neighbor_col] == CellKind.MINE:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _neighbor_positions(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """Valid neighbors of an in-bounds position."""
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.contains(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of up to 8 (row, col) tuples, clipped at the edges.

        Raises:
            OutOfBounds: The center cell is outside the grid.
        """
        self.index_of(row, col)
        return self._neighbor_positions(row, col)

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index_of(self, row: int, col: int) -> int:
        """Flat row-major index of a position, validating bounds."""
        if not self.contains(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return row * self.cols + col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at a position."""
        return self._cells[self.index_of(row, col)]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        return iter(self._cells)

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Iterate over all (row, col) positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of every mine."""
        return [
            divmod(index, self.cols)
            for index, cell in enumerate(self._cells)
            if cell.is_mine
        ]

    def set_visibility(
        self, row: int, col: int, visibility: CellVisibility
    ) -> None:
        """
        Change the visibility of a cell.

        No game rules are applied here beyond keeping revealed cells
        revealed.

        Raises:
            OutOfBounds: Position is outside the grid.
            ValueError: The cell is revealed and visibility differs.
        """
        index = self.index_of(row, col)
        cell = self._cells[index]
        if cell.visibility == visibility:
            return
        if cell.is_revealed:
            raise ValueError(f"Cell ({row}, {col}) is already revealed")

        if cell.is_flagged:
            self._flagged_count -= 1
        if visibility == CellVisibility.FLAGGED:
            self._flagged_count += 1
        if visibility == CellVisibility.REVEALED:
            self._revealed_count += 1
        self._cells[index] = replace(cell, visibility=visibility)

    def relocate_mine(self, row: int, col: int) -> Optional[Tuple[int, int]]:
        """
        Move the mine at a position to a random mine-free cell.

        Only allowed before any cell has been revealed. Adjacency counts
        are recomputed for the whole board and visibilities kept.

        Returns:
            The mine's new position, or None if the cell held no mine.
        """
        index = self.index_of(row, col)
        if self._revealed_count:
            raise RuntimeError("Mines cannot move once a cell is revealed")
        if not self._cells[index].is_mine:
            return None

        free = [i for i, cell in enumerate(self._cells) if not cell.is_mine]
        target = self.rng.choice(free)
        kinds = [cell.kind for cell in self._cells]
        kinds[index], kinds[target] = CellKind.EMPTY, CellKind.MINE
        self._cells = [
            replace(
                cell,
                kind=kinds[i],
                adjacent_mine_count=self._count_adjacent(kinds, i),
            )
            for i, cell in enumerate(self._cells)
        ]
        new_position = divmod(target, self.cols)
        logger.debug("Moved mine from (%d, %d) to %s", row, col, new_position)
        return new_position

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def total_mines(self) -> int:
        """Number of mines on the board."""
        return self.config.total_mines

    @property
    def flagged_count(self) -> int:
        """Number of currently flagged cells."""
        return self._flagged_count

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return self._revealed_count

    def render(self) -> str:
        """Player view of the grid, one line per row."""
        return self._format(str)

    def debug(self) -> str:
        """Content view of the grid showing mines and adjacency counts."""
        return self._format(Cell.debug_glyph)

    def _format(self, glyph: Callable[[Cell], str]) -> str:
        """Join one glyph per cell into space-separated rows."""
        lines = []
        for row in range(self.rows):
            start = row * self.cols
            cells = self._cells[start:start + self.cols]
            lines.append("".join(f" {glyph(cell)}" for cell in cells))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
