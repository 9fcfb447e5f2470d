"""Minimal HS256 JWT issue/verify for the admin console."""
from __future__ import annotations

import base64
import hmac
import json
import time
from dataclasses import dataclass, field
from hashlib import sha256
from typing import Any, Dict, Optional

from studio_engines.config import runtime_config

DEFAULT_TOKEN_TTL_SECONDS = 60 * 60 * 12


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


@dataclass
class AuthContext:
    user_id: str
    email: str
    role: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class JwtService:
    def __init__(self, secret: Optional[str] = None, ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS) -> None:
        self._secret = secret
        self._ttl_seconds = ttl_seconds

    def _get_secret(self) -> str:
        secret = self._secret or runtime_config.get_jwt_signing_secret()
        if not secret:
            raise RuntimeError("AUTH_JWT_SIGNING is not configured")
        return secret

    def issue_token(self, claims: Dict[str, object]) -> str:
        header = {"alg": "HS256", "typ": "JWT"}
        payload = dict(claims)
        payload.setdefault("exp", int(time.time()) + self._ttl_seconds)
        secret = self._get_secret().encode("utf-8")
        signing_input = ".".join(
            [
                _b64url(json.dumps(header, separators=(",", ":"), sort_keys=True).encode()),
                _b64url(json.dumps(payload, separators=(",", ":"), sort_keys=True).encode()),
            ]
        )
        signature = hmac.new(secret, signing_input.encode("utf-8"), sha256).digest()
        return signing_input + "." + _b64url(signature)

    def decode_token(self, token: str) -> AuthContext:
        try:
            header_b64, payload_b64, sig_b64 = token.split(".")
        except ValueError:
            raise ValueError("invalid token")
        secret = self._get_secret().encode("utf-8")
        signing_input = header_b64 + "." + payload_b64
        expected_sig = hmac.new(secret, signing_input.encode("utf-8"), sha256).digest()
        if not hmac.compare_digest(expected_sig, _b64url_decode(sig_b64)):
            raise ValueError("invalid signature")
        payload = json.loads(_b64url_decode(payload_b64))
        exp = payload.get("exp")
        if exp is not None and int(exp) < int(time.time()):
            raise ValueError("token expired")
        return AuthContext(
            user_id=payload["sub"],
            email=payload.get("email", ""),
            role=payload.get("role", ""),
            claims=payload,
        )


def default_jwt_service() -> JwtService:
    return JwtService()
