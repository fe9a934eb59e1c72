"""
Error taxonomy for the session engine.

Every rejection carries a stable reason code and a human-readable
message so a transport layer can map it to its own response.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from ..game import GameStatus


class RejectReason(Enum):
    """Stable codes for rejected operations."""

    MISSING_FIELDS = "missing_fields"
    INVALID_SESSION_ID = "invalid_session_id"
    INVALID_SIZE = "invalid_size"
    INVALID_MINES = "invalid_mines"
    SIZE_TOO_LARGE = "size_too_large"
    TOO_MANY_MINES = "too_many_mines"
    GAME_OVER = "game_over"
    INVALID_COORDINATES = "invalid_coordinates"
    ALREADY_REVEALED = "already_revealed"
    NOT_FOUND = "not_found"


class EngineError(Exception):
    """Base class for rejected engine operations."""

    def __init__(self, reason: RejectReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "reason": self.reason.value}


class ValidationError(EngineError, ValueError):
    """
    Malformed or out-of-policy input.

    Moves on a finished game also carry the terminal status and the
    disclosed grid.
    """

    def __init__(
        self,
        reason: RejectReason,
        message: str,
        status: Optional[GameStatus] = None,
        grid: Optional[List[List[str]]] = None,
    ) -> None:
        super().__init__(reason, message)
        self.status = status
        self.grid = grid

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        if self.status is not None:
            payload["status"] = self.status.value
        if self.grid is not None:
            payload["grid"] = self.grid
        return payload


class NotFoundError(EngineError, LookupError):
    """Unknown session id."""

    def __init__(self, session_id: str) -> None:
        super().__init__(RejectReason.NOT_FOUND, "Game not found")
        self.session_id = session_id
