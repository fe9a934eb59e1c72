"""
Session module for Minesweeper games.

Holds the state of one game: hidden board, reveal mask, progress
counters and game status.
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Union

import numpy as np

from .grid import MINE, place_mines


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a session."""

    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


# ============================================================================
# Session Data Class
# ============================================================================

@dataclass
class Session:
    """
    One Minesweeper game.

    Attributes:
        session_id: Caller-supplied key.
        size: Grid dimension (grid is size x size).
        mine_count: Number of mines on the board.
        board: int8 array, -1 for mines, 0-8 neighbor counts elsewhere.
        revealed: Boolean reveal mask, same shape as board.
        revealed_count: Revealed non-mine cells.
        target_reveal_count: Safe cells; revealing all of them wins.
        status: Current game status.
    """

    session_id: str
    size: int
    mine_count: int
    board: np.ndarray = field(repr=False)
    revealed: np.ndarray = field(repr=False)
    revealed_count: int = 0
    target_reveal_count: int = 0
    status: GameStatus = GameStatus.ACTIVE

    @classmethod
    def new(
        cls,
        session_id: str,
        size: int,
        mine_count: int,
        rng: random.Random,
    ) -> "Session":
        """
        Create a session with randomly placed mines.

        Inputs are assumed valid; see engine validation.
        """
        board = place_mines(size, mine_count, rng)
        return cls._from_array(session_id, board, mine_count)

    @classmethod
    def from_board(
        cls,
        session_id: str,
        board: Union[np.ndarray, Sequence[Sequence[int]]],
    ) -> "Session":
        """
        Create a session from a pre-computed board.

        Args:
            session_id: Caller-supplied key.
            board: Square grid of -1 (mine) and neighbor counts.

        Returns:
            Fresh active session over a copy of the board.
        """
        array = np.array(board, dtype=np.int8)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError("Board must be square")
        mine_count = int(np.count_nonzero(array == MINE))
        return cls._from_array(session_id, array, mine_count)

    @classmethod
    def _from_array(
        cls, session_id: str, board: np.ndarray, mine_count: int
    ) -> "Session":
        size = board.shape[0]
        return cls(
            session_id=session_id,
            size=size,
            mine_count=mine_count,
            board=board,
            revealed=np.zeros((size, size), dtype=bool),
            target_reveal_count=size * size - mine_count,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_active(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.ACTIVE

    @property
    def show_mines(self) -> bool:
        """Mines are disclosed once the game is over."""
        return self.status != GameStatus.ACTIVE

    def is_revealed(self, row: int, col: int) -> bool:
        return bool(self.revealed[row, col])

    def hidden_cells(self) -> List[tuple]:
        """Positions that have not been revealed."""
        rows, cols = np.nonzero(~self.revealed)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]
