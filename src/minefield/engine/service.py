"""
Game engine - boundary operations for Minesweeper sessions.

Operations:
    create_session(size, mine_count, session_id)  Start a game
    apply_move(session_id, row, col)              Reveal a cell
    inspect_session(session_id)                   Read game state

Rejected operations raise ValidationError or NotFoundError and leave
all state unchanged. Operations on one session id run under that
id's lock.
"""
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..game import GameStatus, Session, render_grid, reveal
from .config import EngineConfig
from .errors import NotFoundError, RejectReason, ValidationError
from .store import SessionStore
from .validation import (
    validate_create,
    validate_move,
    validate_move_fields,
    validate_session_id,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Results
# ============================================================================

@dataclass
class CreateResult:
    """Summary of a newly created session."""

    session_id: str
    size: int
    mine_count: int
    status: GameStatus
    grid: List[List[str]]
    message: str = "Game created successfully"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "session_id": self.session_id,
            "size": self.size,
            "mine_count": self.mine_count,
            "status": self.status.value,
            "grid": self.grid,
        }


@dataclass
class MoveResult:
    """Outcome of an applied move."""

    session_id: str
    status: GameStatus
    grid: List[List[str]]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "session_id": self.session_id,
            "status": self.status.value,
            "grid": self.grid,
        }


@dataclass
class SessionView:
    """Read-only view of a session."""

    session_id: str
    size: int
    mine_count: int
    status: GameStatus
    grid: List[List[str]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "size": self.size,
            "mine_count": self.mine_count,
            "status": self.status.value,
            "grid": self.grid,
        }


# ============================================================================
# Engine
# ============================================================================

class GameEngine:
    """
    Owns the session table and applies operations to it.

    One engine is constructed per process (or per test); there is no
    module-level session state.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        store: Optional[SessionStore] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Engine settings (default: EngineConfig()).
            store: Session table (default: a new empty store).
        """
        self.config = config or EngineConfig()
        self.store = store or SessionStore()
        self.rng = random.Random(self.config.seed)

    def create_session(
        self,
        size: Any,
        mine_count: Any,
        session_id: Any,
        replace: bool = False,
    ) -> CreateResult:
        """
        Create a session with randomly placed mines.

        An existing session with the same id is replaced; this is
        logged unless replace is set.

        Args:
            size: Grid dimension.
            mine_count: Number of mines.
            session_id: Caller-supplied key.
            replace: The caller expects to overwrite its own session.

        Returns:
            Session summary with the (fully hidden) grid.

        Raises:
            ValidationError: If the input is missing or out of policy.
        """
        try:
            size, mine_count = validate_create(
                size, mine_count, session_id, self.config.max_size
            )
        except ValidationError as exc:
            logger.debug("Rejected create for %r: %s", session_id, exc.message)
            raise

        with self.store.lock(session_id):
            session = Session.new(session_id, size, mine_count, self.rng)
            self._register(session, warn=not replace)
            grid = render_grid(session)

        logger.info(
            "Created session %r: %dx%d with %d mines",
            session_id, size, size, mine_count,
        )
        return CreateResult(
            session_id=session_id,
            size=size,
            mine_count=mine_count,
            status=session.status,
            grid=grid,
        )

    def put_session(self, session: Session) -> None:
        """Register a pre-built session, replacing any with the same id."""
        with self.store.lock(session.session_id):
            self._register(session)

    def get_session(self, session_id: Any) -> Session:
        """
        Look up a session.

        Raises:
            NotFoundError: If the id is unknown.
        """
        session = self.store.get(session_id)
        if session is None:
            raise NotFoundError(session_id)
        return session

    def apply_move(self, session_id: Any, row: Any, col: Any) -> MoveResult:
        """
        Reveal a cell in a session.

        Args:
            session_id: Target session.
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            New status and grid. Mines are disclosed once the game ends.

        Raises:
            ValidationError: On missing fields, a finished game, bad
                coordinates or an already revealed cell.
            NotFoundError: If the id is unknown.
        """
        validate_move_fields(session_id, row, col)
        self.get_session(session_id)

        with self.store.lock(session_id):
            session = self.get_session(session_id)
            try:
                row, col = validate_move(session, row, col)
            except ValidationError as exc:
                logger.debug(
                    "Rejected move (%r, %r) on %r: %s",
                    row, col, session_id, exc.message,
                )
                raise

            before = session.revealed_count
            status = reveal(session, row, col)
            grid = render_grid(session)

        logger.debug(
            "Move (%d, %d) on %r revealed %d cells",
            row, col, session_id, session.revealed_count - before,
        )

        if status == GameStatus.ACTIVE:
            message = "Move successful"
        else:
            message = f"Game over. You {status.value}."
            logger.info("Session %r ended: %s", session_id, status.value)

        return MoveResult(
            session_id=session_id, status=status, grid=grid, message=message
        )

    def inspect_session(self, session_id: Any) -> SessionView:
        """
        Read the state of a session.

        Raises:
            ValidationError: If no id is given or it is not a string.
            NotFoundError: If the id is unknown.
        """
        if session_id is None or session_id == "":
            raise ValidationError(
                RejectReason.MISSING_FIELDS, "GameId is required"
            )
        validate_session_id(session_id)
        self.get_session(session_id)

        with self.store.lock(session_id):
            session = self.get_session(session_id)
            return SessionView(
                session_id=session_id,
                size=session.size,
                mine_count=session.mine_count,
                status=session.status,
                grid=render_grid(session),
            )

    def _register(self, session: Session, warn: bool = True) -> None:
        previous = self.store.put(session.session_id, session)
        if previous is not None and warn:
            logger.warning(
                "Session %r replaced an existing session", session.session_id
            )
