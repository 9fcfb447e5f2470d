from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from studio_engines.common.error_envelope import not_found_error
from studio_engines.config import runtime_config
from studio_engines.logging.audit import emit_audit_event
from studio_engines.sessions.models import Session, SessionCreate, SessionUpdate
from studio_engines.sessions.repository import (
    FirestoreSessionRepository,
    InMemorySessionRepository,
    SessionRepository,
)

logger = logging.getLogger(__name__)


def _default_repo() -> SessionRepository:
    if runtime_config.get_backend("SESSIONS") == "firestore":
        try:
            return FirestoreSessionRepository()
        except Exception as exc:
            logger.warning("Firestore sessions unavailable; using in-memory store", exc_info=exc)
            return InMemorySessionRepository()
    return InMemorySessionRepository()


class SessionService:
    def __init__(self, repo: Optional[SessionRepository] = None) -> None:
        self.repo = repo or _default_repo()

    def list_sessions(self) -> List[Session]:
        return self.repo.list()

    def get_session(self, session_id: str) -> Session:
        session = self.repo.get(session_id)
        if not session:
            not_found_error("session", session_id)
        return session

    def create_session(self, payload: SessionCreate, actor: Optional[str] = None) -> Session:
        created = self.repo.create(Session(**payload.model_dump()))
        emit_audit_event(action="session.create", surface="sessions", actor=actor, metadata={"session_id": created.id})
        return created

    def update_session(self, session_id: str, patch: SessionUpdate, actor: Optional[str] = None) -> Session:
        session = self.get_session(session_id)
        changes = patch.model_dump(exclude_unset=True)
        updated = Session.model_validate({**session.model_dump(), **changes, "updated_at": datetime.now(timezone.utc)})
        saved = self.repo.update(updated)
        emit_audit_event(
            action="session.update",
            surface="sessions",
            actor=actor,
            metadata={"session_id": session_id, "fields": sorted(changes)},
        )
        return saved

    def delete_session(self, session_id: str, actor: Optional[str] = None) -> None:
        self.get_session(session_id)
        self.repo.delete(session_id)
        emit_audit_event(action="session.delete", surface="sessions", actor=actor, metadata={"session_id": session_id})


_default_service: Optional[SessionService] = None


def get_session_service() -> SessionService:
    global _default_service
    if _default_service is None:
        _default_service = SessionService()
    return _default_service


def set_session_service(service: Optional[SessionService]) -> None:
    global _default_service
    _default_service = service
