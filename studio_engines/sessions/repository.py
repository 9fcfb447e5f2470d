from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.sessions.models import Session

RESOURCE_KIND = "session"


class SessionRepository(Protocol):
    def create(self, session: Session) -> Session: ...
    def get(self, session_id: str) -> Optional[Session]: ...
    def list(self) -> List[Session]: ...
    def update(self, session: Session) -> Session: ...
    def delete(self, session_id: str) -> None: ...


class InMemorySessionRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create(self, session: Session) -> Session:
        with self._lock:
            self._items[session.id] = session
        return session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._items.get(session_id)

    def list(self) -> List[Session]:
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda s: s.session_date)

    def update(self, session: Session) -> Session:
        with self._lock:
            self._items[session.id] = session
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._items.pop(session_id, None)


class FirestoreSessionRepository:
    """Firestore implementation. Dates are stored as ISO strings so they sort."""

    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore sessions")
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "sessions"

    def _col(self):
        return self._client.collection(self._collection)

    def create(self, session: Session) -> Session:
        try:
            self._col().document(session.id).set(session.model_dump(mode="json"))
        except Exception as exc:
            raise RepositoryError(f"session write failed: {exc}", RESOURCE_KIND) from exc
        return session

    def get(self, session_id: str) -> Optional[Session]:
        try:
            snap = self._col().document(session_id).get()
        except Exception as exc:
            raise RepositoryError(f"session read failed: {exc}", RESOURCE_KIND) from exc
        if snap and snap.exists:
            return Session(**snap.to_dict())
        return None

    def list(self) -> List[Session]:
        try:
            return [Session(**d.to_dict()) for d in self._col().order_by("session_date").stream()]
        except Exception as exc:
            raise RepositoryError(f"session read failed: {exc}", RESOURCE_KIND) from exc

    def update(self, session: Session) -> Session:
        return self.create(session)

    def delete(self, session_id: str) -> None:
        try:
            self._col().document(session_id).delete()
        except Exception as exc:
            raise RepositoryError(f"session delete failed: {exc}", RESOURCE_KIND) from exc
