"""
Render module for Minesweeper sessions.

Projects a session into the grid of tokens a player may see.
"""
from typing import List, Optional

from .grid import MINE
from .session import Session


# ============================================================================
# Display Tokens
# ============================================================================

EMPTY_TOKEN = " "
HIDDEN_TOKEN = "#"
MINE_TOKEN = "*"


def render_cell(session: Session, row: int, col: int, show_mines: bool) -> str:
    """Token for a single cell."""
    value = int(session.board[row, col])
    if session.revealed[row, col] and value != MINE:
        return EMPTY_TOKEN if value == 0 else str(value)
    if show_mines and value == MINE:
        return MINE_TOKEN
    return HIDDEN_TOKEN


def render_grid(
    session: Session, show_mines: Optional[bool] = None
) -> List[List[str]]:
    """
    Build the player-visible grid.

    Args:
        session: Session to render.
        show_mines: Disclose unrevealed mines. Defaults to True once
            the game is over and False while it is active.

    Returns:
        size x size list of display tokens.
    """
    if show_mines is None:
        show_mines = session.show_mines
    return [
        [render_cell(session, row, col, show_mines) for col in range(session.size)]
        for row in range(session.size)
    ]


def render_text(grid: List[List[str]]) -> str:
    """Render a token grid as text with row and column headers."""
    size = len(grid)
    width = len(str(max(size - 1, 0)))
    header = " " * (width + 1) + " ".join(
        str(col % 10) for col in range(size)
    )
    lines = [header]
    for row, tokens in enumerate(grid):
        lines.append(f"{row:>{width}} " + " ".join(tokens))
    return "\n".join(lines)
