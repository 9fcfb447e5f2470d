"""Auth dependency and admin enforcement."""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException

from studio_engines.identity.jwt_service import AuthContext, default_jwt_service


def get_auth_context(authorization: Optional[str] = Header(default=None)) -> AuthContext:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="missing bearer token")
    token = authorization.split(" ", 1)[1]
    try:
        return default_jwt_service().decode_token(token)
    except Exception as exc:
        raise HTTPException(status_code=401, detail=f"invalid token: {exc}") from exc


def require_admin(auth: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if not auth.is_admin:
        raise HTTPException(status_code=403, detail="admin role required")
    return auth
