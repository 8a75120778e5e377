"""
Minesweeper agents module.

Provides players for MinesweeperEnv:
- BaseAgent: Common interface and action helpers
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
