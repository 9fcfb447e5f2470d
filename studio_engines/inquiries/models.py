from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

InquiryStatus = Literal["new", "pending", "responded", "closed"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class InquirySubmission(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    organization: Optional[str] = Field(default=None, max_length=200)
    message: str = Field(min_length=1, max_length=2000)

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("phone", "organization", mode="before")
    @classmethod
    def _optional_strip(cls, v):
        return _blank_to_none(v)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email")
        return v


class Inquiry(InquirySubmission):
    id: str = Field(default_factory=lambda: uuid4().hex)
    status: InquiryStatus = "new"
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class InquiryStatusUpdate(BaseModel):
    status: InquiryStatus
