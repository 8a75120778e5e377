"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/empty plus adjacent count) and visibility
(hidden/revealed/flagged/questioned).
"""
from dataclasses import dataclass
from enum import IntEnum


# ============================================================================
# Constants
# ============================================================================

class CellKind(IntEnum):
    """What a cell contains. Values are the bulk export codes."""

    MINE = 0
    EMPTY = 1


class CellVisibility(IntEnum):
    """Possible visual states of a cell. Values are the bulk export codes."""

    REVEALED = 0
    FLAGGED = 1
    QUESTIONED = 2
    HIDDEN = 3


# Glyphs for text views of the grid
MINE_GLYPH = "●"
HIDDEN_GLYPH = "□"
QUESTION_GLYPH = "?"
FLAG_GLYPH = "⚑"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable values; the board swaps in an updated copy on
    every visibility change.

    Attributes:
        kind: Whether this cell contains a mine.
        visibility: Current visual state.
        adjacent_mine_count: Count of mines in neighboring cells (0-8).
    """

    kind: CellKind = CellKind.EMPTY
    visibility: CellVisibility = CellVisibility.HIDDEN
    adjacent_mine_count: int = 0

    @property
    def is_mine(self) -> bool:
        """Check if cell contains a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.visibility == CellVisibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.visibility == CellVisibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == CellVisibility.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell is marked with a question."""
        return self.visibility == CellVisibility.QUESTIONED

    @property
    def is_lone(self) -> bool:
        """Check if cell is empty with no adjacent mines."""
        return self.kind == CellKind.EMPTY and self.adjacent_mine_count == 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.visibility == CellVisibility.HIDDEN:
            return -1
        if self.visibility == CellVisibility.FLAGGED:
            return -2
        if self.visibility == CellVisibility.QUESTIONED:
            return -3
        if self.is_mine:
            return 9
        return self.adjacent_mine_count

    def debug_glyph(self) -> str:
        """Glyph showing the cell's content regardless of visibility."""
        if self.is_mine:
            return MINE_GLYPH
        return str(self.adjacent_mine_count)

    def __str__(self) -> str:
        if self.visibility == CellVisibility.FLAGGED:
            return FLAG_GLYPH
        if self.visibility == CellVisibility.QUESTIONED:
            return QUESTION_GLYPH
        if self.visibility == CellVisibility.HIDDEN:
            return HIDDEN_GLYPH
        return self.debug_glyph()
