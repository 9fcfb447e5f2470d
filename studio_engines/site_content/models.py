from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SiteContent(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    section_key: str
    content: Dict[str, str] = Field(default_factory=dict)
    updated_at: datetime = Field(default_factory=_now)
    updated_by: Optional[str] = None


class SiteContentUpdate(BaseModel):
    content: Dict[str, str]


class ResolvedSection(BaseModel):
    section_key: str
    content: Dict[str, str]
    stored: bool = False
