from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from studio_engines.common.error_envelope import not_found_error
from studio_engines.config import runtime_config
from studio_engines.gallery_links.models import GalleryLink, GalleryLinkCreate, GalleryLinkUpdate
from studio_engines.gallery_links.repository import (
    FirestoreGalleryLinkRepository,
    GalleryLinkRepository,
    InMemoryGalleryLinkRepository,
)
from studio_engines.logging.audit import emit_audit_event

logger = logging.getLogger(__name__)


def _default_repo() -> GalleryLinkRepository:
    if runtime_config.get_backend("GALLERY_LINKS") == "firestore":
        try:
            return FirestoreGalleryLinkRepository()
        except Exception as exc:
            logger.warning("Firestore gallery links unavailable; using in-memory store", exc_info=exc)
            return InMemoryGalleryLinkRepository()
    return InMemoryGalleryLinkRepository()


class GalleryLinkService:
    def __init__(self, repo: Optional[GalleryLinkRepository] = None) -> None:
        self.repo = repo or _default_repo()

    def list_links(self, active_only: bool = False) -> List[GalleryLink]:
        links = self.repo.list()
        if active_only:
            return [l for l in links if l.is_active and l.drive_url]
        return links

    def get_link(self, link_id: str) -> GalleryLink:
        link = self.repo.get(link_id)
        if not link:
            not_found_error("gallery_link", link_id)
        return link

    def create_link(self, payload: GalleryLinkCreate, actor: Optional[str] = None) -> GalleryLink:
        created = self.repo.create(GalleryLink(**payload.model_dump()))
        emit_audit_event(action="gallery_link.create", surface="gallery", actor=actor, metadata={"link_id": created.id})
        return created

    def update_link(self, link_id: str, patch: GalleryLinkUpdate, actor: Optional[str] = None) -> GalleryLink:
        link = self.get_link(link_id)
        changes = patch.model_dump(exclude_unset=True)
        updated = GalleryLink.model_validate({**link.model_dump(), **changes, "updated_at": datetime.now(timezone.utc)})
        saved = self.repo.update(updated)
        emit_audit_event(
            action="gallery_link.update",
            surface="gallery",
            actor=actor,
            metadata={"link_id": link_id, "fields": sorted(changes)},
        )
        return saved

    def delete_link(self, link_id: str, actor: Optional[str] = None) -> None:
        self.get_link(link_id)
        self.repo.delete(link_id)
        emit_audit_event(action="gallery_link.delete", surface="gallery", actor=actor, metadata={"link_id": link_id})


_default_service: Optional[GalleryLinkService] = None


def get_gallery_link_service() -> GalleryLinkService:
    global _default_service
    if _default_service is None:
        _default_service = GalleryLinkService()
    return _default_service


def set_gallery_link_service(service: Optional[GalleryLinkService]) -> None:
    global _default_service
    _default_service = service
