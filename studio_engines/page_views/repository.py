from __future__ import annotations

import threading
from typing import List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.page_views.models import PageViewCreate, PageViewEvent

RESOURCE_KIND = "page_view"


class PageViewRepository(Protocol):
    def insert(self, record: PageViewCreate) -> PageViewEvent: ...
    def select_all(self) -> List[PageViewEvent]: ...


class InMemoryPageViewRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: List[PageViewEvent] = []
        self._lock = threading.Lock()

    def insert(self, record: PageViewCreate) -> PageViewEvent:
        event = PageViewEvent(**record.model_dump())
        with self._lock:
            self._items.append(event)
        return event

    def select_all(self) -> List[PageViewEvent]:
        with self._lock:
            items = list(self._items)
        return sorted(items, key=lambda e: e.created_at, reverse=True)

    def add_existing(self, event: PageViewEvent) -> PageViewEvent:
        """Load an already-stamped event (imports and fixtures)."""
        with self._lock:
            self._items.append(event)
        return event


class FirestorePageViewRepository:
    """Firestore implementation."""

    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore page views")
        self._firestore = firestore
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "page_views"

    def _col(self):
        return self._client.collection(self._collection)

    def insert(self, record: PageViewCreate) -> PageViewEvent:
        event = PageViewEvent(**record.model_dump())
        data = event.model_dump(mode="json")
        data["created_at"] = event.created_at
        try:
            self._col().document(event.id).set(data)
        except Exception as exc:
            raise RepositoryError(f"page view insert failed: {exc}", RESOURCE_KIND) from exc
        return event

    def select_all(self) -> List[PageViewEvent]:
        query = self._col().order_by("created_at", direction=self._firestore.Query.DESCENDING)
        try:
            return [PageViewEvent(**d.to_dict()) for d in query.stream()]
        except Exception as exc:
            raise RepositoryError(f"page view read failed: {exc}", RESOURCE_KIND) from exc
