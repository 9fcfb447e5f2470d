from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

SessionStatus = Literal["scheduled", "completed", "cancelled"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SessionCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    organization: str = Field(min_length=1, max_length=200)
    location: Optional[str] = None
    session_date: date
    session_time: Optional[str] = None
    participants: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    status: SessionStatus = "scheduled"


class SessionUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    organization: Optional[str] = Field(default=None, min_length=1, max_length=200)
    location: Optional[str] = None
    session_date: Optional[date] = None
    session_time: Optional[str] = None
    participants: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    status: Optional[SessionStatus] = None

    @field_validator("title", "organization", "session_date", "status", mode="before")
    @classmethod
    def _required_not_null(cls, v):
        # omit the field to leave it unchanged; null would erase a required value
        if v is None:
            raise ValueError("field cannot be null")
        return v


class Session(SessionCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
