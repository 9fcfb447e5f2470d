from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.gallery_links.models import GalleryLink

RESOURCE_KIND = "gallery_link"


class GalleryLinkRepository(Protocol):
    def create(self, link: GalleryLink) -> GalleryLink: ...
    def get(self, link_id: str) -> Optional[GalleryLink]: ...
    def list(self) -> List[GalleryLink]: ...
    def update(self, link: GalleryLink) -> GalleryLink: ...
    def delete(self, link_id: str) -> None: ...


class InMemoryGalleryLinkRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: Dict[str, GalleryLink] = {}
        self._lock = threading.Lock()

    def create(self, link: GalleryLink) -> GalleryLink:
        with self._lock:
            self._items[link.id] = link
        return link

    def get(self, link_id: str) -> Optional[GalleryLink]:
        with self._lock:
            return self._items.get(link_id)

    def list(self) -> List[GalleryLink]:
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda l: (l.display_order, l.created_at))

    def update(self, link: GalleryLink) -> GalleryLink:
        return self.create(link)

    def delete(self, link_id: str) -> None:
        with self._lock:
            self._items.pop(link_id, None)


class FirestoreGalleryLinkRepository:
    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore gallery links")
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "gallery_links"

    def _col(self):
        return self._client.collection(self._collection)

    def create(self, link: GalleryLink) -> GalleryLink:
        try:
            self._col().document(link.id).set(link.model_dump())
        except Exception as exc:
            raise RepositoryError(f"gallery link write failed: {exc}", RESOURCE_KIND) from exc
        return link

    def get(self, link_id: str) -> Optional[GalleryLink]:
        try:
            snap = self._col().document(link_id).get()
        except Exception as exc:
            raise RepositoryError(f"gallery link read failed: {exc}", RESOURCE_KIND) from exc
        if snap and snap.exists:
            return GalleryLink(**snap.to_dict())
        return None

    def list(self) -> List[GalleryLink]:
        try:
            return [GalleryLink(**d.to_dict()) for d in self._col().order_by("display_order").stream()]
        except Exception as exc:
            raise RepositoryError(f"gallery link read failed: {exc}", RESOURCE_KIND) from exc

    def update(self, link: GalleryLink) -> GalleryLink:
        return self.create(link)

    def delete(self, link_id: str) -> None:
        try:
            self._col().document(link_id).delete()
        except Exception as exc:
            raise RepositoryError(f"gallery link delete failed: {exc}", RESOURCE_KIND) from exc
