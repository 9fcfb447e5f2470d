from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from studio_engines.config import runtime_config
from studio_engines.identity.auth_schemas import AuthTokenResponse, LoginRequest
from studio_engines.identity.jwt_service import default_jwt_service
from studio_engines.identity.passwords import verify_stored_hash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthTokenResponse)
def login(payload: LoginRequest):
    admin_email = runtime_config.get_admin_email()
    stored_hash = runtime_config.get_admin_password_hash()
    if not admin_email or not stored_hash or not runtime_config.get_jwt_signing_secret():
        raise HTTPException(status_code=503, detail="admin login is not configured")
    email = payload.email.strip().lower()
    if email != admin_email or not verify_stored_hash(payload.password, stored_hash):
        logger.warning("admin login rejected", extra={"email": email})
        raise HTTPException(status_code=401, detail="invalid credentials")
    token = default_jwt_service().issue_token({"sub": email, "email": email, "role": "admin"})
    return AuthTokenResponse(token=token, email=email, role="admin")
