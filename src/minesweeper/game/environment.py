"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over GameEngine.
"""
from enum import IntEnum
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .engine import GameEngine, GameStatus
from .errors import NoFlagsRemaining


class Command(IntEnum):
    """Player command encoded in the upper part of an action index."""

    REVEAL = 0
    FLAG = 1
    QUESTION = 2


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = questioned cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        Action i applies command i // (rows * cols) to the cell at
        flat index i % (rows * cols): 0 reveal, 1 flag, 2 question.

    Rewards:
        - +1 for revealing cells
        - 0 for placing or removing a mark
        - +10 for winning the game
        - -10 for losing the game
        - -0.1 for an action with no effect
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    REVEAL_REWARD = 1.0
    MARK_REWARD = 0.0
    WIN_REWARD = 10.0
    LOSS_REWARD = -10.0
    INVALID_REWARD = -0.1

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 at default density).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.engine = GameEngine.from_config(self.config)
        self.render_mode = render_mode
        self._cell_count = self.config.rows * self.config.cols

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(Command) * self._cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.engine = GameEngine.from_config(self.config, seed=board_seed)
        self._steps = 0

        return self.engine.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded command and cell index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        command, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply(command, row, col)

        observation = self.engine.observation()
        terminated = self.engine.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[Command, int, int]:
        """Split an action index into (command, row, col)."""
        command, index = divmod(int(action), self._cell_count)
        row, col = divmod(index, self.config.cols)
        return Command(command), row, col

    def encode_action(self, command: Command, row: int, col: int) -> int:
        """Build the action index for a command on a cell."""
        return int(command) * self._cell_count + row * self.config.cols + col

    def _apply(self, command: Command, row: int, col: int) -> float:
        """
        Apply a command and compute its reward.

        Args:
            command: Command to apply.
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if self.engine.is_over:
            return self.INVALID_REWARD

        try:
            if command == Command.REVEAL:
                changed = self.engine.reveal_cell(row, col)
            elif command == Command.FLAG:
                changed = self.engine.toggle_flag(row, col)
            else:
                changed = self.engine.toggle_question(row, col)
        except NoFlagsRemaining:
            return self.INVALID_REWARD

        if not changed:
            return self.INVALID_REWARD
        if self.engine.status == GameStatus.WON:
            return self.WIN_REWARD
        if self.engine.status == GameStatus.LOST:
            return self.LOSS_REWARD
        if command == Command.REVEAL:
            return self.REVEAL_REWARD
        return self.MARK_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(
            1 for r in range(self.config.rows)
            for c in range(self.config.cols)
            if self.engine.is_revealed(r, c)
        )

        return {
            "steps": self._steps,
            "revealed": revealed,
            "remaining_flags": self.engine.remaining_flags(),
            "total_mines": self.engine.total_mines(),
            "game_state": self.engine.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.engine.is_over:
            return mask

        flags_left = self.engine.remaining_flags() > 0
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self.engine.cell_at(row, col)
                if cell.is_hidden:
                    mask[self.encode_action(Command.REVEAL, row, col)] = True
                    mask[self.encode_action(Command.QUESTION, row, col)] = True
                    if flags_left:
                        mask[self.encode_action(Command.FLAG, row, col)] = True
                elif cell.is_flagged:
                    mask[self.encode_action(Command.FLAG, row, col)] = True
                elif cell.is_questioned:
                    mask[self.encode_action(Command.QUESTION, row, col)] = True
        return mask
