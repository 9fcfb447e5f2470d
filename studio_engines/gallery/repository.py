from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.gallery.models import GalleryImage

RESOURCE_KIND = "gallery_image"


class GalleryRepository(Protocol):
    def create(self, image: GalleryImage) -> GalleryImage: ...
    def get(self, image_id: str) -> Optional[GalleryImage]: ...
    def list(self) -> List[GalleryImage]: ...
    def update(self, image: GalleryImage) -> GalleryImage: ...
    def delete(self, image_id: str) -> None: ...


class InMemoryGalleryRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: Dict[str, GalleryImage] = {}
        self._lock = threading.Lock()

    def create(self, image: GalleryImage) -> GalleryImage:
        with self._lock:
            self._items[image.id] = image
        return image

    def get(self, image_id: str) -> Optional[GalleryImage]:
        with self._lock:
            return self._items.get(image_id)

    def list(self) -> List[GalleryImage]:
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda i: (i.display_order, i.created_at))

    def update(self, image: GalleryImage) -> GalleryImage:
        return self.create(image)

    def delete(self, image_id: str) -> None:
        with self._lock:
            self._items.pop(image_id, None)


class FirestoreGalleryRepository:
    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore gallery")
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "gallery"

    def _col(self):
        return self._client.collection(self._collection)

    def create(self, image: GalleryImage) -> GalleryImage:
        try:
            self._col().document(image.id).set(image.model_dump())
        except Exception as exc:
            raise RepositoryError(f"gallery write failed: {exc}", RESOURCE_KIND) from exc
        return image

    def get(self, image_id: str) -> Optional[GalleryImage]:
        try:
            snap = self._col().document(image_id).get()
        except Exception as exc:
            raise RepositoryError(f"gallery read failed: {exc}", RESOURCE_KIND) from exc
        if snap and snap.exists:
            return GalleryImage(**snap.to_dict())
        return None

    def list(self) -> List[GalleryImage]:
        try:
            return [GalleryImage(**d.to_dict()) for d in self._col().order_by("display_order").stream()]
        except Exception as exc:
            raise RepositoryError(f"gallery read failed: {exc}", RESOURCE_KIND) from exc

    def update(self, image: GalleryImage) -> GalleryImage:
        return self.create(image)

    def delete(self, image_id: str) -> None:
        try:
            self._col().document(image_id).delete()
        except Exception as exc:
            raise RepositoryError(f"gallery delete failed: {exc}", RESOURCE_KIND) from exc
