"""
Evaluation of agents against engine-hosted games.
"""
import logging
from typing import Dict, Optional

from ..engine import GameEngine
from ..env import MinesweeperEnv
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Play a fixed number of games with an agent and report metrics.
    """

    def __init__(
        self,
        size: int = 9,
        mine_count: int = 10,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        engine: Optional[GameEngine] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            size: Grid dimension.
            mine_count: Mines per game.
            num_episodes: Number of games to play.
            max_steps: Step cap per game (default: one per cell).
            engine: Engine hosting the games.
        """
        self.size = size
        self.mine_count = mine_count
        self.num_episodes = num_episodes
        self.max_steps = max_steps or size * size
        self.engine = engine

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(self.size, self.mine_count, engine=self.engine)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            observation, info = env.reset()
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(action)
                total_reward += float(reward)
                total_steps += 1
                if terminated or truncated:
                    break

            if info["status"] == "won":
                wins += 1
            total_revealed += info["revealed"]
            logger.debug("Episode %d finished: %s", episode, info["status"])

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
