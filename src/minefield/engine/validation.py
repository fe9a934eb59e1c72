"""
Input validation for engine boundary operations.

Checks run in a fixed order so the first failing rule determines
the reported reason.
"""
import numbers
from typing import Any, Optional, Tuple

from ..game import Session, render_grid
from .errors import RejectReason, ValidationError


def _as_int(value: Any) -> Optional[int]:
    """Coerce an integral number to int, or None if not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate_session_id(session_id: Any) -> None:
    """Reject ids that are not strings."""
    if not isinstance(session_id, str):
        raise ValidationError(
            RejectReason.INVALID_SESSION_ID, "GameId must be a string"
        )


def validate_create(
    size: Any,
    mine_count: Any,
    session_id: Any,
    max_size: int,
) -> Tuple[int, int]:
    """
    Validate creation input.

    Args:
        size: Requested grid dimension.
        mine_count: Requested number of mines.
        session_id: Caller-supplied key.
        max_size: Largest accepted grid dimension.

    Returns:
        (size, mine_count) as ints.

    Raises:
        ValidationError: On the first failing rule.
    """
    if _is_missing(size) or _is_missing(mine_count) or _is_missing(session_id):
        raise ValidationError(
            RejectReason.MISSING_FIELDS, "Size, mines, and gameId are required"
        )
    validate_session_id(session_id)

    checked_size = _as_int(size)
    if checked_size is None or checked_size <= 0:
        raise ValidationError(
            RejectReason.INVALID_SIZE, "Size must be a positive number"
        )

    checked_mines = _as_int(mine_count)
    if checked_mines is None or checked_mines <= 0:
        raise ValidationError(
            RejectReason.INVALID_MINES, "Mines must be a positive number"
        )

    if checked_size > max_size:
        raise ValidationError(
            RejectReason.SIZE_TOO_LARGE, f"Grid size cannot exceed {max_size}"
        )

    if checked_mines >= checked_size * checked_size:
        raise ValidationError(
            RejectReason.TOO_MANY_MINES,
            "Number of mines must be less than the total number of cells",
        )

    return checked_size, checked_mines


def validate_move_fields(session_id: Any, row: Any, col: Any) -> None:
    """Reject moves with missing fields."""
    if _is_missing(session_id) or row is None or col is None:
        raise ValidationError(
            RejectReason.MISSING_FIELDS, "GameId, row, and col are required"
        )
    validate_session_id(session_id)


def validate_move(session: Session, row: Any, col: Any) -> Tuple[int, int]:
    """
    Validate a move against a session.

    Args:
        session: Target session.
        row: Requested row.
        col: Requested column.

    Returns:
        (row, col) as ints.

    Raises:
        ValidationError: If the game is over, the position is out of
            bounds, or the cell is already revealed.
    """
    if not session.is_active:
        raise ValidationError(
            RejectReason.GAME_OVER,
            f"Game is already over. You {session.status.value}.",
            status=session.status,
            grid=render_grid(session, show_mines=True),
        )

    checked_row = _as_int(row)
    checked_col = _as_int(col)
    if (
        checked_row is None
        or checked_col is None
        or not 0 <= checked_row < session.size
        or not 0 <= checked_col < session.size
    ):
        raise ValidationError(
            RejectReason.INVALID_COORDINATES, "Invalid coordinates"
        )

    if session.is_revealed(checked_row, checked_col):
        raise ValidationError(
            RejectReason.ALREADY_REVEALED, "Cell already revealed"
        )

    return checked_row, checked_col
