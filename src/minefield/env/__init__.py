"""
Agent environment module.

Wraps engine sessions in a Gymnasium interface.
"""
from .environment import MinesweeperEnv

__all__ = ["MinesweeperEnv"]
