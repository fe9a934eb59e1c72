"""
Reveal module for Minesweeper sessions.

Applies a single reveal move: mine hits end the game, safe cells
flood outward across zero-count regions.
"""
from typing import List, Tuple

from .grid import MINE, is_valid_position, neighbors
from .session import GameStatus, Session


def flood_fill(session: Session, row: int, col: int) -> int:
    """
    Reveal a connected zero region and its numbered border.

    Uses an explicit stack instead of recursion. A numbered cell is
    revealed but does not expand. Must be seeded on a non-mine cell.

    Args:
        session: Session to update.
        row: Starting row.
        col: Starting column.

    Returns:
        Number of cells newly revealed.
    """
    size = session.size
    stack: List[Tuple[int, int]] = [(row, col)]
    newly_revealed = 0

    while stack:
        current_row, current_col = stack.pop()
        if not is_valid_position(current_row, current_col, size):
            continue
        if session.revealed[current_row, current_col]:
            continue

        session.revealed[current_row, current_col] = True
        session.revealed_count += 1
        newly_revealed += 1

        if session.board[current_row, current_col] == 0:
            stack.extend(neighbors(current_row, current_col, size))

    return newly_revealed


def reveal(session: Session, row: int, col: int) -> GameStatus:
    """
    Reveal a cell and update the game status.

    The caller guarantees the position is in bounds, the session is
    active and the cell is hidden.

    Args:
        session: Session to update.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Status after the move.
    """
    if session.board[row, col] == MINE:
        # The mine stays unrevealed; it shows up through disclosure.
        session.status = GameStatus.LOST
        return session.status

    flood_fill(session, row, col)

    if session.revealed_count == session.target_reveal_count:
        session.status = GameStatus.WON
    return session.status
