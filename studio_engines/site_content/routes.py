from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from studio_engines.identity.auth import require_admin
from studio_engines.site_content.models import ResolvedSection, SiteContent, SiteContentUpdate
from studio_engines.site_content.service import get_site_content_service

router = APIRouter(prefix="/content", tags=["content"])


@router.get("", response_model=Dict[str, Dict[str, str]])
def get_content_map():
    return get_site_content_service().content_map()


@router.get("/{section_key}", response_model=ResolvedSection)
def get_section(section_key: str):
    return get_site_content_service().resolve_section(section_key)


@router.put("/{section_key}", response_model=SiteContent)
def update_section(section_key: str, payload: SiteContentUpdate, auth=Depends(require_admin)):
    return get_site_content_service().update_section(section_key, payload.content, updated_by=auth.email)
