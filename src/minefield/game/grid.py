"""
Grid module for Minesweeper sessions.

Builds the hidden board: random mine placement with incremental
neighbor counting.
"""
import random
from typing import List, Tuple

import numpy as np


# ============================================================================
# Constants
# ============================================================================

MINE = -1

_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def is_valid_position(row: int, col: int, size: int) -> bool:
    """Check if position is within a size x size grid."""
    return 0 <= row < size and 0 <= col < size


def neighbors(row: int, col: int, size: int) -> List[Tuple[int, int]]:
    """
    Get valid neighboring cell positions.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        size: Grid dimension.

    Returns:
        List of (row, col) tuples for in-bounds neighbors.
    """
    result = []
    for delta_row, delta_col in _DIRECTIONS:
        new_row = row + delta_row
        new_col = col + delta_col
        if is_valid_position(new_row, new_col, size):
            result.append((new_row, new_col))
    return result


def count_adjacent_mines(board: np.ndarray, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    size = board.shape[0]
    return sum(
        1 for r, c in neighbors(row, col, size) if board[r, c] == MINE
    )


# ============================================================================
# Mine Placement
# ============================================================================

def update_adjacent_cells(board: np.ndarray, row: int, col: int) -> None:
    """Increment the counts of non-mine cells around a new mine."""
    size = board.shape[0]
    for r, c in neighbors(row, col, size):
        if board[r, c] != MINE:
            board[r, c] += 1


def place_mines(
    size: int,
    mine_count: int,
    rng: random.Random,
) -> np.ndarray:
    """
    Create a board with mines placed uniformly at random.

    Cells are sampled until mine_count distinct cells hold a mine.
    Neighbor counts are updated as each mine lands; a counted cell
    that later becomes a mine has its count overwritten.

    Args:
        size: Grid dimension (board is size x size).
        mine_count: Mines to place, 0 < mine_count < size * size.
        rng: Source of randomness.

    Returns:
        int8 array with MINE at mines and 0-8 elsewhere.
    """
    board = np.zeros((size, size), dtype=np.int8)
    placed = 0
    while placed < mine_count:
        row = rng.randrange(size)
        col = rng.randrange(size)
        if board[row, col] == MINE:
            continue
        board[row, col] = MINE
        placed += 1
        update_adjacent_cells(board, row, col)
    return board
