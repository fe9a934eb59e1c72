"""
Gymnasium environment over a Minefield engine session.

Lets agents play through the same boundary operations a transport
layer uses.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ..engine import EngineConfig, EngineError, GameEngine
from ..game import MINE, GameStatus, render_grid, render_text


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBS = -1
MINE_OBS = 9

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_REJECTED = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for one engine session at a time.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = disclosed mine (after game over)

    Actions:
        Discrete action space of size size * size.
        Action i corresponds to cell (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a rejected move (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        size: int = 9,
        mine_count: int = 10,
        engine: Optional[GameEngine] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            size: Grid dimension.
            mine_count: Mines per game.
            engine: Engine hosting the sessions (default: a new one).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.size = size
        self.mine_count = mine_count
        self.engine = engine or GameEngine(EngineConfig(max_size=max(size, 1)))
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=HIDDEN_OBS,
            high=MINE_OBS,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(size * size)

        self.session_id = f"env-{id(self):x}"
        self._started = False
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Replace this environment's engine session with a fresh game.

        Args:
            seed: Reseeds the engine's mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)

        self._steps = 0
        self.engine.create_session(
            self.size, self.mine_count, self.session_id, replace=True
        )
        self._started = True

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell for an action.

        Args:
            action: Cell index (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self._started:
            raise RuntimeError("Call reset() before step()")

        row, col = self._action_to_position(action)
        self._steps += 1
        reward = self._apply(row, col)

        session = self.engine.get_session(self.session_id)
        terminated = not session.is_active
        return self._get_observation(), reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.size, int(action) % self.size

    def _apply(self, row: int, col: int) -> float:
        """Apply a move through the engine and score it."""
        try:
            result = self.engine.apply_move(self.session_id, row, col)
        except EngineError:
            return REWARD_REJECTED

        if result.status == GameStatus.WON:
            return REWARD_WIN
        if result.status == GameStatus.LOST:
            return REWARD_MINE
        return REWARD_SAFE

    def _get_observation(self) -> np.ndarray:
        """Build the observation array from the current session."""
        session = self.engine.get_session(self.session_id)
        obs = np.where(session.revealed, session.board, HIDDEN_OBS).astype(np.int8)
        if session.show_mines:
            obs[(session.board == MINE) & ~session.revealed] = MINE_OBS
        return obs

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.engine.get_session(self.session_id)
        return {
            "steps": self._steps,
            "revealed": session.revealed_count,
            "total_safe": session.target_reveal_count,
            "status": session.status.value,
        }

    def render(self) -> Optional[str]:
        """Render the current grid."""
        if not self._started:
            return None
        text = render_text(render_grid(self.engine.get_session(self.session_id)))
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        session = self.engine.get_session(self.session_id)
        return ~session.revealed.flatten()
