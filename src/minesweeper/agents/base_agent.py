"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..game.environment import Command


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    a command and cell based on the current observation.
    """

    def __init__(self, board_rows: int, board_cols: int) -> None:
        """
        Initialize the agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
        """
        self.board_rows = board_rows
        self.board_cols = board_cols
        self.total_cells = board_rows * board_cols
        self.action_count = len(Command) * self.total_cells

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (command * cells + row * cols + col).
        """
        pass

    def action_to_command(self, action: int) -> Tuple[Command, int, int]:
        """Convert action index to (command, row, col)."""
        command, index = divmod(int(action), self.total_cells)
        row, col = divmod(index, self.board_cols)
        return Command(command), row, col

    def command_to_action(self, command: Command, row: int, col: int) -> int:
        """Convert (command, row, col) to action index."""
        return int(command) * self.total_cells + row * self.board_cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get a reveal-only action mask from an observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = reveal of a hidden cell.
        """
        mask = np.zeros(self.action_count, dtype=bool)
        # Hidden cells (value -1) can be revealed
        mask[:self.total_cells] = observation.flatten() == -1
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
