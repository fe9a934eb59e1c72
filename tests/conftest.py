"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield.engine import EngineConfig, GameEngine
from minefield.game import Session


# ============================================================================
# Board Fixtures
# ============================================================================

SINGLE_MINE_BOARD = [
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 1, -1, 1, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
]

TWO_MINE_BOARD = [
    [0, 1, 1, 1, 0],
    [1, 2, -1, 1, 0],
    [1, -1, 2, 1, 0],
    [1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0],
]

RENDER_BOARD = [
    [0, 1, -1],
    [1, 2, 1],
    [-1, 1, 0],
]


@pytest.fixture
def single_mine_session() -> Session:
    """5x5 session with one mine in the center."""
    return Session.from_board("single", SINGLE_MINE_BOARD)


@pytest.fixture
def two_mine_session() -> Session:
    """5x5 session with mines at (1, 2) and (2, 1)."""
    return Session.from_board("two", TWO_MINE_BOARD)


@pytest.fixture
def render_session() -> Session:
    """3x3 session with a fixed partial reveal."""
    session = Session.from_board("render", RENDER_BOARD)
    session.revealed[0, 0] = True
    session.revealed[0, 1] = True
    session.revealed[1, 0] = True
    session.revealed[2, 2] = True
    session.revealed_count = 4
    return session


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine() -> GameEngine:
    """Engine with a fixed seed and the default size limit."""
    return GameEngine(EngineConfig(seed=1234))


@pytest.fixture
def single_mine_engine(
    engine: GameEngine, single_mine_session: Session
) -> GameEngine:
    """Engine holding the single-mine session under id 'single'."""
    engine.put_session(single_mine_session)
    return engine


@pytest.fixture
def two_mine_engine(engine: GameEngine, two_mine_session: Session) -> GameEngine:
    """Engine holding the two-mine session under id 'two'."""
    engine.put_session(two_mine_session)
    return engine
