from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DeviceType(str, Enum):
    MOBILE = "Mobile"
    TABLET = "Tablet"
    DESKTOP = "Desktop"


class Browser(str, Enum):
    FIREFOX = "Firefox"
    CHROME = "Chrome"
    SAFARI = "Safari"
    EDGE = "Edge"
    OPERA = "Opera"
    OTHER = "Other"


class PageViewCreate(BaseModel):
    """Insert payload; the store assigns ``id`` and ``created_at``."""

    model_config = ConfigDict(frozen=True)

    page_path: str
    visitor_id: str
    user_agent: Optional[str] = None
    referrer: Optional[str] = None
    device_type: Optional[DeviceType] = None
    browser: Optional[Browser] = None
    country: Optional[str] = None
    city: Optional[str] = None


class PageViewEvent(PageViewCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=_now)


class TrackPageViewRequest(BaseModel):
    page_path: str = Field(min_length=1, max_length=512)
    referrer: Optional[str] = Field(default=None, max_length=2048)


class TrackPageViewResponse(BaseModel):
    status: Literal["queued", "skipped"]
    page_path: str


class DayViews(BaseModel):
    date: str
    views: int


class AnalyticsSummary(BaseModel):
    today_views: int = 0
    week_views: int = 0
    month_views: int = 0
    total_views: int = 0
    unique_visitors: int = 0
    unique_visitors_today: int = 0
    device_counts: Dict[str, int] = Field(default_factory=dict)
    browser_counts: Dict[str, int] = Field(default_factory=dict)
    page_counts: Dict[str, int] = Field(default_factory=dict)
    views_by_day: List[DayViews] = Field(default_factory=list)
    recent_views: List[PageViewEvent] = Field(default_factory=list)


class AnalyticsReport(BaseModel):
    status: Literal["ok", "error"] = "ok"
    error: Optional[str] = None
    summary: AnalyticsSummary
