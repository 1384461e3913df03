from datetime import UTC, datetime, timedelta

import structlog

from app.bulk_import.session import ImportSession

logger = structlog.get_logger()

# Process-local; sessions are transient and never persisted.
import_sessions: dict[str, ImportSession] = {}


class SessionRepository:
    def __init__(self, store: dict[str, ImportSession], ttl: timedelta) -> None:
        self._store = store
        self._ttl = ttl

    def create(self) -> ImportSession:
        self.cleanup_expired()
        session = ImportSession(self._ttl)
        self._store[session.id] = session
        return session

    def get(self, session_id: str) -> ImportSession | None:
        session = self._store.get(session_id)
        if session is None:
            return None
        if session.is_expired():
            del self._store[session_id]
            logger.info("bulk_import_session_expired", session_id=session_id)
            return None
        return session

    def delete(self, session_id: str) -> bool:
        return self._store.pop(session_id, None) is not None

    def cleanup_expired(self) -> int:
        now = datetime.now(UTC)
        expired = [sid for sid, session in self._store.items() if session.is_expired(now)]
        for sid in expired:
            del self._store[sid]
        if expired:
            logger.info("bulk_import_sessions_cleaned", count=len(expired))
        return len(expired)
