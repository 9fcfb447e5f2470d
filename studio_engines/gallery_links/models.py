from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def _now() -> datetime:
    return datetime.now(timezone.utc)


class GalleryLinkCreate(BaseModel):
    """An external album (e.g. a shared drive folder) shown under the gallery."""

    title: str = Field(min_length=1, max_length=200)
    drive_url: str = Field(min_length=1, max_length=2048)
    display_order: int = 0
    is_active: bool = True

    @field_validator("title", "drive_url", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class GalleryLinkUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    drive_url: Optional[str] = Field(default=None, min_length=1, max_length=2048)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("title", "drive_url", "display_order", "is_active", mode="before")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v.strip() if isinstance(v, str) else v


class GalleryLink(GalleryLinkCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
