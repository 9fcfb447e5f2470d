from __future__ import annotations

from fastapi.testclient import TestClient

from studio_engines.page_views.repository import InMemoryPageViewRepository
from studio_engines.page_views.service import PageViewService, set_page_view_service
from studio_engines.server import create_app


def test_health_is_always_ok():
    client = TestClient(create_app())
    assert client.get("/health").json() == {"status": "ok", "version": "0.1.0"}


def test_ready_reports_each_backend():
    client = TestClient(create_app())
    resp = client.get("/ready")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert set(body["backends"]) == {
        "page_views",
        "site_content",
        "inquiries",
        "sessions",
        "gallery",
        "gallery_links",
    }
    assert body["backends"]["sessions"] == {"configured": "memory", "active": "memory", "ok": True}


def test_ready_is_503_when_firestore_fell_back_to_memory(monkeypatch):
    monkeypatch.setenv("PAGE_VIEWS_BACKEND", "firestore")
    set_page_view_service(PageViewService(repo=InMemoryPageViewRepository()))
    client = TestClient(create_app())
    resp = client.get("/ready")
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "degraded"
    assert body["backends"]["page_views"] == {"configured": "firestore", "active": "memory", "ok": False}
    assert body["backends"]["inquiries"]["ok"] is True
