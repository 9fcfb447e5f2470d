"""Canonical error envelope for all studio responses.

Standardized structure (carried under FastAPI's ``detail`` key):
{
  "error": {
    "code": "string",
    "message": "string",
    "http_status": 400,
    "resource_kind": "string | null",
    "details": {}
  }
}
"""
from __future__ import annotations

from typing import Any, Dict, NoReturn, Optional

from fastapi import HTTPException
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Canonical error detail structure."""
    code: str
    message: str
    http_status: int
    resource_kind: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Top-level error envelope returned by all studio endpoints."""
    error: ErrorDetail


def build_error_envelope(
    code: str,
    message: str,
    status_code: int = 400,
    resource_kind: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> ErrorEnvelope:
    """Construct an ErrorEnvelope (without raising)."""
    error_detail = ErrorDetail(
        code=code,
        message=message,
        http_status=status_code,
        resource_kind=resource_kind,
        details=details or {},
    )
    return ErrorEnvelope(error=error_detail)


def error_response(
    code: str,
    message: str,
    status_code: int = 400,
    resource_kind: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> NoReturn:
    """Raise an HTTPException carrying the canonical error envelope.

    Args:
        code: Machine-readable error code (e.g., "inquiry.not_found")
        message: Human-readable error message
        status_code: HTTP status code (default 400)
        resource_kind: The resource type (page_view, inquiry, session, ...)
        details: Additional context dict
    """
    envelope = build_error_envelope(
        code=code,
        message=message,
        status_code=status_code,
        resource_kind=resource_kind,
        details=details,
    )
    raise HTTPException(status_code=status_code, detail=envelope.model_dump())


def not_found_error(resource_kind: str, resource_id: str) -> NoReturn:
    error_response(
        code=f"{resource_kind}.not_found",
        message=f"{resource_kind} {resource_id} not found",
        status_code=404,
        resource_kind=resource_kind,
        details={"id": resource_id},
    )
