"""
Base agent interface for Minefield environments.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..env.environment import HIDDEN_OBS


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Agents choose which cell to reveal from the current observation.
    """

    def __init__(self, size: int) -> None:
        """
        Initialize the agent.

        Args:
            size: Grid dimension of the environment.
        """
        self.size = size
        self.total_cells = size * size

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
            Action index (row * size + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.size, action % self.size

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.size + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Mask of hidden cells in an observation."""
        return observation.flatten() == HIDDEN_OBS

    def reset(self) -> None:
        """Reset agent state for a new episode."""
