"""
Random agent for Minefield environments.

Baseline that reveals hidden cells uniformly at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects hidden cells uniformly at random."""

    def __init__(self, size: int = 9, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            size: Grid dimension of the environment.
            seed: Random seed for reproducibility.
        """
        super().__init__(size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick one hidden cell.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of hidden cells; derived from
                the observation when omitted.

        Returns:
            Flat index of the chosen cell, or 0 when none is hidden.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            # Nothing hidden; the move will be rejected.
            return 0
        return int(self.rng.choice(valid_indices))
