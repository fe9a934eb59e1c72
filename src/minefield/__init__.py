"""
Minefield - server-side Minesweeper session engine.

Provides the game core (grid, flood fill, rendering), the session
engine consumed by transport layers, and an agent environment.
"""
__version__ = "0.1.0"
