from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

from studio_engines.identity.jwt_service import JwtService
from studio_engines.identity.passwords import encode_stored_hash, verify_stored_hash
from studio_engines.server import create_app


def _setup(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "Owner@Example.com")
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", encode_stored_hash("namaste"))
    return TestClient(create_app())


def test_login_issues_admin_token(monkeypatch):
    client = _setup(monkeypatch)
    resp = client.post("/auth/login", json={"email": "owner@example.com", "password": "namaste"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["role"] == "admin"
    ctx = JwtService().decode_token(body["token"])
    assert ctx.email == "owner@example.com"
    assert ctx.is_admin

    dashboard = client.get("/dashboard", headers={"Authorization": f"Bearer {body['token']}"})
    assert dashboard.status_code == 200


@pytest.mark.parametrize(
    "email,password",
    [("owner@example.com", "wrong"), ("someone@example.com", "namaste")],
)
def test_login_rejects_bad_credentials(monkeypatch, email, password):
    client = _setup(monkeypatch)
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 401


def test_login_unconfigured(monkeypatch):
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD_HASH", raising=False)
    client = TestClient(create_app())
    resp = client.post("/auth/login", json={"email": "owner@example.com", "password": "namaste"})
    assert resp.status_code == 503


def test_tampered_and_expired_tokens_rejected():
    service = JwtService(secret="s1")
    token = service.issue_token({"sub": "u", "email": "u@example.com", "role": "admin"})
    with pytest.raises(ValueError):
        JwtService(secret="s2").decode_token(token)
    expired = service.issue_token({"sub": "u", "role": "admin", "exp": int(time.time()) - 10})
    with pytest.raises(ValueError):
        service.decode_token(expired)
    with pytest.raises(ValueError):
        service.decode_token("not-a-token")


def test_invalid_bearer_is_401():
    client = TestClient(create_app())
    resp = client.get("/inquiries", headers={"Authorization": "Bearer nope.nope.nope"})
    assert resp.status_code == 401


def test_stored_hash_round_trip():
    stored = encode_stored_hash("namaste")
    assert verify_stored_hash("namaste", stored)
    assert not verify_stored_hash("other", stored)
    assert not verify_stored_hash("namaste", "malformed")
