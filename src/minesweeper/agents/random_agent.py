"""
Random agent for Minesweeper.

Serves as a baseline by guessing among legal commands, leaning on
reveals so that games end in a reasonable number of steps.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that guesses commands at random.

    Each turn it reveals a random hidden cell with probability
    reveal_probability, and otherwise picks any legal command, flags
    and question marks included. Since a game is only won by flagging
    every mine, a random player rarely wins.
    """

    def __init__(
        self,
        board_rows: int = 9,
        board_cols: int = 9,
        reveal_probability: float = 0.8,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
            reveal_probability: Chance of restricting a turn to reveals.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_rows, board_cols)
        if not 0.0 <= reveal_probability <= 1.0:
            raise ValueError(
                f"reveal_probability must be in [0, 1], got {reveal_probability}"
            )
        self.reveal_probability = reveal_probability
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random legal command.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index of a reveal, flag or question command.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0

        # Reveal actions occupy the first total_cells indices
        reveal_indices = valid_indices[valid_indices < self.total_cells]
        if len(reveal_indices) and self.rng.random() < self.reveal_probability:
            return int(self.rng.choice(reveal_indices))

        return int(self.rng.choice(valid_indices))
