"""
Agents module.

Provides agents that play through the environment:
- RandomAgent: Baseline random selection
- Evaluator: Plays games and reports metrics
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
