"""
Minesweeper rules engine.

Subpackages:
- game: board model, reveal and flag rules, game facade, export and
  Gymnasium adapter
- agents: automated players for the Gymnasium adapter
"""
__version__ = "0.1.0"
