"""Audit helper for recording admin mutations."""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AuditEvent(BaseModel):
    action: str
    surface: str = "audit"
    actor: str = "system"
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def _log_audit_event(event: AuditEvent) -> dict:
    logger.info(
        "audit %s",
        event.action,
        extra={"audit": event.model_dump(mode="json")},
    )
    return {"status": "accepted"}


_audit_logger: Callable[[AuditEvent], dict] = _log_audit_event


def set_audit_logger(sink: Optional[Callable[[AuditEvent], dict]]) -> None:
    global _audit_logger
    _audit_logger = sink or _log_audit_event


def emit_audit_event(
    action: str,
    surface: str = "audit",
    actor: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    event = AuditEvent(
        action=action,
        surface=surface,
        actor=actor or "system",
        metadata=metadata or {},
    )
    result = _audit_logger(event)
    if not result or result.get("status") != "accepted":
        detail = (result or {}).get("error", "audit persistence failed")
        if os.environ.get("AUDIT_STRICT") == "1":
            raise RuntimeError(detail)
        logger.warning("audit persistence failed: %s", detail)
