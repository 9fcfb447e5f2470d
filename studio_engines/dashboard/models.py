from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from studio_engines.inquiries.models import Inquiry
from studio_engines.sessions.models import Session


class DashboardSummary(BaseModel):
    total_inquiries: int = 0
    new_inquiries: int = 0
    total_sessions: int = 0
    upcoming_sessions: int = 0
    total_participants: int = 0
    unique_organizations: int = 0
    recent_inquiries: List[Inquiry] = Field(default_factory=list)
    next_sessions: List[Session] = Field(default_factory=list)
