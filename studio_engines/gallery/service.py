from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from studio_engines.common.error_envelope import not_found_error
from studio_engines.config import runtime_config
from studio_engines.gallery.models import GalleryImage, GalleryImageCreate, GalleryImageUpdate
from studio_engines.gallery.repository import (
    FirestoreGalleryRepository,
    GalleryRepository,
    InMemoryGalleryRepository,
)
from studio_engines.logging.audit import emit_audit_event

logger = logging.getLogger(__name__)


def _default_repo() -> GalleryRepository:
    if runtime_config.get_backend("GALLERY") == "firestore":
        try:
            return FirestoreGalleryRepository()
        except Exception as exc:
            logger.warning("Firestore gallery unavailable; using in-memory store", exc_info=exc)
            return InMemoryGalleryRepository()
    return InMemoryGalleryRepository()


class GalleryService:
    def __init__(self, repo: Optional[GalleryRepository] = None) -> None:
        self.repo = repo or _default_repo()

    def list_images(self, active_only: bool = False) -> List[GalleryImage]:
        """Images by ``display_order``; the public gallery passes ``active_only``."""
        images = self.repo.list()
        if active_only:
            return [i for i in images if i.is_active]
        return images

    def get_image(self, image_id: str) -> GalleryImage:
        image = self.repo.get(image_id)
        if not image:
            not_found_error("gallery_image", image_id)
        return image

    def create_image(self, payload: GalleryImageCreate, actor: Optional[str] = None) -> GalleryImage:
        created = self.repo.create(GalleryImage(**payload.model_dump()))
        emit_audit_event(action="gallery.create", surface="gallery", actor=actor, metadata={"image_id": created.id})
        return created

    def update_image(self, image_id: str, patch: GalleryImageUpdate, actor: Optional[str] = None) -> GalleryImage:
        image = self.get_image(image_id)
        changes = patch.model_dump(exclude_unset=True)
        updated = GalleryImage.model_validate({**image.model_dump(), **changes, "updated_at": datetime.now(timezone.utc)})
        saved = self.repo.update(updated)
        emit_audit_event(
            action="gallery.update",
            surface="gallery",
            actor=actor,
            metadata={"image_id": image_id, "fields": sorted(changes)},
        )
        return saved

    def delete_image(self, image_id: str, actor: Optional[str] = None) -> None:
        self.get_image(image_id)
        self.repo.delete(image_id)
        emit_audit_event(action="gallery.delete", surface="gallery", actor=actor, metadata={"image_id": image_id})


_default_service: Optional[GalleryService] = None


def get_gallery_service() -> GalleryService:
    global _default_service
    if _default_service is None:
        _default_service = GalleryService()
    return _default_service


def set_gallery_service(service: Optional[GalleryService]) -> None:
    global _default_service
    _default_service = service
