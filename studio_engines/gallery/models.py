from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def _now() -> datetime:
    return datetime.now(timezone.utc)


class GalleryImageCreate(BaseModel):
    """A gallery entry. ``image_url`` points at an already-uploaded file."""

    image_url: str = Field(min_length=1, max_length=2048)
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    display_order: int = 0
    is_active: bool = True


class GalleryImageUpdate(BaseModel):
    image_url: Optional[str] = Field(default=None, min_length=1, max_length=2048)
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("image_url", "display_order", "is_active", mode="before")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class GalleryImage(GalleryImageCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
