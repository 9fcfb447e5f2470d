from __future__ import annotations

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from studio_engines.identity.jwt_service import JwtService
from studio_engines.logging.audit import set_audit_logger
from studio_engines.site_content.defaults import DEFAULT_CONTENT
from studio_engines.site_content.repository import InMemorySiteContentRepository
from studio_engines.site_content.service import SiteContentService, set_site_content_service
from studio_engines.server import create_app


class CaptureAudit:
    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)
        return {"status": "accepted"}


def _setup():
    repo = InMemorySiteContentRepository()
    set_site_content_service(SiteContentService(repo=repo))
    audit = CaptureAudit()
    set_audit_logger(audit)
    token = JwtService().issue_token({"sub": "owner@example.com", "email": "owner@example.com", "role": "admin"})
    return repo, audit, {"Authorization": f"Bearer {token}"}


def test_unstored_section_resolves_to_defaults():
    _setup()
    client = TestClient(create_app())
    resp = client.get("/content/hero")
    assert resp.status_code == 200
    body = resp.json()
    assert body["stored"] is False
    assert body["content"] == DEFAULT_CONTENT["hero"]


def test_update_overrides_defaults_and_keeps_blank_fallbacks():
    repo, audit, headers = _setup()
    client = TestClient(create_app())
    resp = client.put(
        "/content/stats",
        json={"content": {"sessions_count": "250+", "sessions_label": ""}},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["updated_by"] == "owner@example.com"

    resolved = client.get("/content/stats").json()
    assert resolved["stored"] is True
    assert resolved["content"]["sessions_count"] == "250+"
    assert resolved["content"]["sessions_label"] == "Sessions Conducted"
    assert resolved["content"]["institutions_count"] == "20+"

    assert client.get("/content").json() == {"stats": {"sessions_count": "250+", "sessions_label": ""}}
    assert audit.events[0].action == "site_content.update"


def test_update_keeps_section_id():
    repo, _, headers = _setup()
    client = TestClient(create_app())
    first = client.put("/content/about", json={"content": {"title": "One"}}, headers=headers).json()
    second = client.put("/content/about", json={"content": {"title": "Two"}}, headers=headers).json()
    assert first["id"] == second["id"]
    assert repo.get("about").content == {"title": "Two"}


def test_update_requires_admin():
    _setup()
    client = TestClient(create_app())
    resp = client.put("/content/hero", json={"content": {"title": "x"}})
    assert resp.status_code == 401


def test_get_section_service_raises_404_for_missing():
    _setup()
    service = SiteContentService(repo=InMemorySiteContentRepository())
    with pytest.raises(HTTPException) as exc_info:
        service.get_section("hero")
    assert exc_info.value.status_code == 404
