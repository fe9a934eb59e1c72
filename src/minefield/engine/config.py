"""
Configuration for the session engine.
"""
import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_MAX_SIZE = 20


@dataclass
class EngineConfig:
    """
    Settings for a GameEngine.

    Attributes:
        max_size: Largest grid dimension accepted at creation.
        seed: Seed for mine placement; None draws from the OS.
    """

    max_size: int = DEFAULT_MAX_SIZE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.max_size < 1:
            raise ValueError("Maximum grid size must be positive")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Build a config from MINEFIELD_MAX_SIZE and MINEFIELD_SEED.

        Unset variables fall back to the defaults.
        """
        max_size = os.getenv("MINEFIELD_MAX_SIZE")
        seed = os.getenv("MINEFIELD_SEED")
        return cls(
            max_size=int(max_size) if max_size else DEFAULT_MAX_SIZE,
            seed=int(seed) if seed else None,
        )
