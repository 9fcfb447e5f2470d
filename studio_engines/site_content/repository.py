from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.site_content.models import SiteContent

RESOURCE_KIND = "site_content"


class SiteContentRepository(Protocol):
    def get(self, section_key: str) -> Optional[SiteContent]: ...
    def list(self) -> List[SiteContent]: ...
    def upsert(self, item: SiteContent) -> SiteContent: ...


class InMemorySiteContentRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: Dict[str, SiteContent] = {}
        self._lock = threading.Lock()

    def get(self, section_key: str) -> Optional[SiteContent]:
        with self._lock:
            return self._items.get(section_key)

    def list(self) -> List[SiteContent]:
        with self._lock:
            return list(self._items.values())

    def upsert(self, item: SiteContent) -> SiteContent:
        with self._lock:
            self._items[item.section_key] = item
        return item


class FirestoreSiteContentRepository:
    """Firestore implementation keyed by section_key."""

    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore site content")
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "site_content"

    def _col(self):
        return self._client.collection(self._collection)

    def get(self, section_key: str) -> Optional[SiteContent]:
        try:
            snap = self._col().document(section_key).get()
        except Exception as exc:
            raise RepositoryError(f"site content read failed: {exc}", RESOURCE_KIND) from exc
        if snap and snap.exists:
            return SiteContent(**snap.to_dict())
        return None

    def list(self) -> List[SiteContent]:
        try:
            return [SiteContent(**d.to_dict()) for d in self._col().stream()]
        except Exception as exc:
            raise RepositoryError(f"site content read failed: {exc}", RESOURCE_KIND) from exc

    def upsert(self, item: SiteContent) -> SiteContent:
        try:
            self._col().document(item.section_key).set(item.model_dump())
        except Exception as exc:
            raise RepositoryError(f"site content write failed: {exc}", RESOURCE_KIND) from exc
        return item
