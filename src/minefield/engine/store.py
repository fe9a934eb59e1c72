"""
In-memory session store.

Maps session ids to sessions and hands out one lock per id so that
mutating operations on the same session are serialized.
"""
import threading
from typing import Dict, Optional

from ..game import Session


class SessionStore:
    """
    Session table scoped to one engine.

    No eviction: sessions live as long as the store.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._table_lock = threading.Lock()

    def put(self, session_id: str, session: Session) -> Optional[Session]:
        """
        Insert or replace a session.

        Returns:
            The session previously stored under this id, if any.
        """
        with self._table_lock:
            previous = self._sessions.get(session_id)
            self._sessions[session_id] = session
        return previous

    def get(self, session_id: str) -> Optional[Session]:
        """Get a session, or None if unknown."""
        with self._table_lock:
            return self._sessions.get(session_id)

    def lock(self, session_id: str) -> threading.Lock:
        """
        Get the lock serializing operations on a session id.

        The same lock object is returned for every call with the same
        id; use it as a context manager.
        """
        with self._table_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    def __contains__(self, session_id: object) -> bool:
        with self._table_lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._sessions)
