"""
Minesweeper game module.

Provides core game logic: session state, mine placement, flood-fill
reveal and player-visible rendering.
"""
from .grid import (
    MINE,
    count_adjacent_mines,
    neighbors,
    place_mines,
    update_adjacent_cells,
)
from .session import GameStatus, Session
from .reveal import flood_fill, reveal
from .render import (
    EMPTY_TOKEN,
    HIDDEN_TOKEN,
    MINE_TOKEN,
    render_grid,
    render_text,
)

__all__ = [
    "MINE",
    "count_adjacent_mines",
    "neighbors",
    "place_mines",
    "update_adjacent_cells",
    "GameStatus",
    "Session",
    "flood_fill",
    "reveal",
    "EMPTY_TOKEN",
    "HIDDEN_TOKEN",
    "MINE_TOKEN",
    "render_grid",
    "render_text",
]
