"""
Session engine module.

Provides the boundary operations (create, move, inspect) over an
in-memory session store, with validation and a typed error taxonomy.
"""
from .config import DEFAULT_MAX_SIZE, EngineConfig
from .errors import EngineError, NotFoundError, RejectReason, ValidationError
from .store import SessionStore
from .service import CreateResult, GameEngine, MoveResult, SessionView

__all__ = [
    "DEFAULT_MAX_SIZE",
    "EngineConfig",
    "EngineError",
    "NotFoundError",
    "RejectReason",
    "ValidationError",
    "SessionStore",
    "CreateResult",
    "GameEngine",
    "MoveResult",
    "SessionView",
]
