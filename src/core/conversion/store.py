"""In-memory session storage.

Sessions live for the lifetime of the process only; nothing is written to
disk.
"""

from __future__ import annotations

from src.core.conversion.session import ConversionSession
from src.utils.exceptions import SessionNotFoundError
from src.utils.logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Map of session id to :class:`ConversionSession`."""

    def __init__(self) -> None:
        self._sessions: dict[str, ConversionSession] = {}

    def create(self) -> ConversionSession:
        session = ConversionSession()
        self._sessions[session.session_id] = session
        logger.info("session_created", session_id=session.session_id)
        return session

    def get(self, session_id: str) -> ConversionSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("session_deleted", session_id=session_id)

    def __len__(self) -> int:
        return len(self._sessions)
