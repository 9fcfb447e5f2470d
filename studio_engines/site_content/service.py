from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from studio_engines.common.error_envelope import not_found_error
from studio_engines.config import runtime_config
from studio_engines.logging.audit import emit_audit_event
from studio_engines.site_content.defaults import defaults_for
from studio_engines.site_content.models import ResolvedSection, SiteContent
from studio_engines.site_content.repository import (
    FirestoreSiteContentRepository,
    InMemorySiteContentRepository,
    SiteContentRepository,
)

logger = logging.getLogger(__name__)


def _default_repo() -> SiteContentRepository:
    if runtime_config.get_backend("SITE_CONTENT") == "firestore":
        try:
            return FirestoreSiteContentRepository()
        except Exception as exc:
            logger.warning("Firestore site content unavailable; using in-memory store", exc_info=exc)
            return InMemorySiteContentRepository()
    return InMemorySiteContentRepository()


class SiteContentService:
    def __init__(self, repo: Optional[SiteContentRepository] = None) -> None:
        self.repo = repo or _default_repo()

    def list_sections(self) -> List[SiteContent]:
        return self.repo.list()

    def get_section(self, section_key: str) -> SiteContent:
        item = self.repo.get(section_key)
        if not item:
            not_found_error("site_content", section_key)
        return item

    def content_map(self) -> Dict[str, Dict[str, str]]:
        return {item.section_key: item.content for item in self.list_sections()}

    def resolve_section(self, section_key: str) -> ResolvedSection:
        stored = self.repo.get(section_key)
        content = defaults_for(section_key)
        if stored:
            # blank stored values keep the default
            content.update({k: v for k, v in stored.content.items() if v})
        return ResolvedSection(section_key=section_key, content=content, stored=stored is not None)

    def update_section(self, section_key: str, content: Dict[str, str], updated_by: Optional[str] = None) -> SiteContent:
        existing = self.repo.get(section_key)
        item = SiteContent(
            section_key=section_key,
            content=dict(content),
            updated_at=datetime.now(timezone.utc),
            updated_by=updated_by,
        )
        if existing:
            item.id = existing.id
        saved = self.repo.upsert(item)
        emit_audit_event(
            action="site_content.update",
            surface="content",
            actor=updated_by,
            metadata={"section_key": section_key, "fields": sorted(content)},
        )
        return saved


_default_service: Optional[SiteContentService] = None


def get_site_content_service() -> SiteContentService:
    global _default_service
    if _default_service is None:
        _default_service = SiteContentService()
    return _default_service


def set_site_content_service(service: Optional[SiteContentService]) -> None:
    global _default_service
    _default_service = service
