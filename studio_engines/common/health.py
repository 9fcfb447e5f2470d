"""Liveness and readiness probes."""
from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from studio_engines.config import runtime_config

router = APIRouter(tags=["system"])

VERSION = "0.1.0"


class HealthStatus(BaseModel):
    status: str
    version: str = VERSION


class BackendCheck(BaseModel):
    configured: str
    active: str
    ok: bool


class ReadinessStatus(HealthStatus):
    backends: Dict[str, BackendCheck] = Field(default_factory=dict)


def _engine_services() -> List[Tuple[str, str, Callable]]:
    # imported lazily: the engines import from common
    from studio_engines.gallery.service import get_gallery_service
    from studio_engines.gallery_links.service import get_gallery_link_service
    from studio_engines.inquiries.service import get_inquiry_service
    from studio_engines.page_views.service import get_page_view_service
    from studio_engines.sessions.service import get_session_service
    from studio_engines.site_content.service import get_site_content_service

    return [
        ("page_views", "PAGE_VIEWS", get_page_view_service),
        ("site_content", "SITE_CONTENT", get_site_content_service),
        ("inquiries", "INQUIRIES", get_inquiry_service),
        ("sessions", "SESSIONS", get_session_service),
        ("gallery", "GALLERY", get_gallery_service),
        ("gallery_links", "GALLERY_LINKS", get_gallery_link_service),
    ]


def check_backends() -> Dict[str, BackendCheck]:
    """Build every engine's repository and compare it with the configured backend.

    A Firestore backend that failed to initialise falls back to memory; that
    instance is alive but not ready.
    """
    checks: Dict[str, BackendCheck] = {}
    for name, env_prefix, get_service in _engine_services():
        configured = runtime_config.get_backend(env_prefix)
        active = getattr(get_service().repo, "backend", "custom")
        checks[name] = BackendCheck(
            configured=configured,
            active=active,
            ok=active == configured or active == "custom",
        )
    return checks


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(status="ok")


@router.get("/ready", response_model=ReadinessStatus)
def readiness_check(response: Response):
    checks = check_backends()
    ready = all(c.ok for c in checks.values())
    if not ready:
        response.status_code = 503
    return ReadinessStatus(status="ok" if ready else "degraded", backends=checks)
