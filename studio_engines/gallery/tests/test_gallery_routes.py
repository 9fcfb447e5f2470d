from __future__ import annotations

from fastapi.testclient import TestClient

from studio_engines.gallery.models import GalleryImage
from studio_engines.gallery.repository import InMemoryGalleryRepository
from studio_engines.gallery.service import GalleryService, set_gallery_service
from studio_engines.identity.jwt_service import JwtService
from studio_engines.logging.audit import set_audit_logger
from studio_engines.server import create_app


class CaptureAudit:
    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)
        return {"status": "accepted"}


def _setup():
    repo = InMemoryGalleryRepository()
    set_gallery_service(GalleryService(repo=repo))
    audit = CaptureAudit()
    set_audit_logger(audit)
    token = JwtService().issue_token({"sub": "owner@example.com", "email": "owner@example.com", "role": "admin"})
    return repo, audit, {"Authorization": f"Bearer {token}"}


def test_public_list_is_active_and_ordered():
    repo, _, headers = _setup()
    repo.create(GalleryImage(image_url="https://cdn.example.com/b.jpg", display_order=2))
    repo.create(GalleryImage(image_url="https://cdn.example.com/a.jpg", display_order=1))
    repo.create(GalleryImage(image_url="https://cdn.example.com/hidden.jpg", display_order=0, is_active=False))
    client = TestClient(create_app())

    public = client.get("/gallery").json()
    assert [i["image_url"].rsplit("/", 1)[-1] for i in public] == ["a.jpg", "b.jpg"]

    everything = client.get("/gallery/all", headers=headers).json()
    assert [i["display_order"] for i in everything] == [0, 1, 2]


def test_admin_create_update_delete():
    repo, audit, headers = _setup()
    client = TestClient(create_app())

    created = client.post(
        "/gallery",
        json={"image_url": "https://cdn.example.com/yoga-day.jpg", "title": "Yoga Day"},
        headers=headers,
    )
    assert created.status_code == 201
    image = created.json()
    assert image["is_active"] is True
    assert image["display_order"] == 0

    hidden = client.patch(f"/gallery/{image['id']}", json={"is_active": False}, headers=headers)
    assert hidden.status_code == 200
    assert hidden.json()["title"] == "Yoga Day"
    assert client.get("/gallery").json() == []

    assert client.delete(f"/gallery/{image['id']}", headers=headers).json() == {"status": "deleted"}
    assert repo.list() == []
    assert [e.action for e in audit.events] == ["gallery.create", "gallery.update", "gallery.delete"]


def test_update_rejects_null_image_url():
    repo, _, headers = _setup()
    stored = repo.create(GalleryImage(image_url="https://cdn.example.com/a.jpg"))
    client = TestClient(create_app())
    resp = client.patch(f"/gallery/{stored.id}", json={"image_url": None}, headers=headers)
    assert resp.status_code == 422
    assert repo.get(stored.id).image_url == "https://cdn.example.com/a.jpg"


def test_writes_require_admin_and_known_id():
    _, _, headers = _setup()
    client = TestClient(create_app())
    assert client.post("/gallery", json={"image_url": "https://cdn.example.com/a.jpg"}).status_code == 401
    assert client.get("/gallery/all").status_code == 401
    missing = client.patch("/gallery/missing", json={"title": "x"}, headers=headers)
    assert missing.status_code == 404
    assert missing.json()["detail"]["error"]["code"] == "gallery_image.not_found"
