"""Runtime configuration helpers for the studio engines."""
from __future__ import annotations

import os
from datetime import timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_VISITOR_COOKIE_MAX_AGE = 60 * 60 * 24 * 365 * 2


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _truthy_env(name: str) -> bool:
    value = _get_env(name)
    if not value:
        return False
    return value.strip().lower() in {"1", "true", "yes"}


def get_backend(name: str) -> str:
    """Backend selector for an engine, e.g. ``get_backend("PAGE_VIEWS")``."""
    return (_get_env(f"{name}_BACKEND") or "memory").lower()


def get_firestore_project() -> Optional[str]:
    return _get_env("GCP_PROJECT_ID") or _get_env("GCP_PROJECT")


def get_analytics_timezone() -> tzinfo:
    name = _get_env("ANALYTICS_TZ")
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def get_visitor_cookie_max_age() -> int:
    raw = _get_env("VISITOR_COOKIE_MAX_AGE")
    if not raw:
        return DEFAULT_VISITOR_COOKIE_MAX_AGE
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_VISITOR_COOKIE_MAX_AGE


def cookie_secure() -> bool:
    return _truthy_env("COOKIE_SECURE")


def get_jwt_signing_secret() -> Optional[str]:
    return _get_env("AUTH_JWT_SIGNING")


def get_admin_email() -> Optional[str]:
    value = _get_env("ADMIN_EMAIL")
    return value.strip().lower() if value else None


def get_admin_password_hash() -> Optional[str]:
    return _get_env("ADMIN_PASSWORD_HASH")


def get_log_level() -> str:
    return (_get_env("LOG_LEVEL") or "INFO").upper()


def get_cors_origins() -> List[str]:
    raw = _get_env("CORS_ORIGINS") or ""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
