"""
Live Session Registry

Lifecycle: start -> active, stop -> stopped. There is no pending or
scheduled state, and a stopped session is never reactivated except by a
fresh start with the same session id, which replaces the record.
"""
import logging
import threading
from typing import Dict, List, Optional

from app.models import LiveSession, SESSION_STOPPED
from app.models.base import iso_timestamp

logger = logging.getLogger(__name__)


class SessionNotFound(LookupError):
    """No session is registered under the given id"""


class SessionNotActive(RuntimeError):
    """The session exists but has been stopped"""


class LiveSessionRegistry:
    """In-memory registry of live sessions keyed by session_id"""

    def __init__(self):
        self._sessions: Dict[str, LiveSession] = {}
        self._lock = threading.RLock()

    def start(self, session_id: str, title: str, instructor: str, tenant_id: str) -> LiveSession:
        """Register a new active session, overwriting any record with the same id"""
        session = LiveSession(
            session_id=session_id,
            title=title,
            instructor=instructor,
            tenant_id=tenant_id,
        )
        with self._lock:
            replaced = session_id in self._sessions
            self._sessions[session_id] = session

        logger.info(f"Live session {session_id} started{' (replaced existing)' if replaced else ''}")
        return session

    def stop(self, session_id: str) -> Optional[LiveSession]:
        """
        Mark a session stopped and stamp end_time.

        Stopping an already stopped session refreshes end_time.
        Returns None for unknown sessions.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            session.status = SESSION_STOPPED
            session.end_time = iso_timestamp()

        logger.info(f"Live session {session_id} stopped")
        return session

    def join(self, session_id: str) -> LiveSession:
        """
        Count one more attendee on an active session.

        Joins are not deduplicated per user.

        Raises:
            SessionNotFound: unknown session_id
            SessionNotActive: session has been stopped
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            if not session.is_active:
                raise SessionNotActive(session_id)
            session.attendees += 1
            return session

    def get(self, session_id: str) -> Optional[LiveSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def list_all(self) -> List[LiveSession]:
        with self._lock:
            return list(self._sessions.values())

    def list_active(self) -> List[LiveSession]:
        return [s for s in self.list_all() if s.is_active]

    def count_active(self) -> int:
        return len(self.list_active())
