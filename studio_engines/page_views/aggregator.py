"""Analytics over the full page-view log.

Every metric is recomputed from the complete event list on each call. That
is fine for a single site's visit log; a high-volume store would need
server-side pre-aggregation instead.
"""
from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Optional, Sequence

from studio_engines.page_views.models import AnalyticsSummary, DayViews, PageViewEvent

UNKNOWN_LABEL = "Unknown"
DAYS_IN_CHART = 7
WEEK_WINDOW = timedelta(days=7)
MONTH_WINDOW = timedelta(days=30)
RECENT_LIMIT = 10


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _local_date(ts: datetime, tz: tzinfo) -> str:
    return _as_utc(ts).astimezone(tz).date().isoformat()


def _label(value) -> str:
    if value is None:
        return UNKNOWN_LABEL
    return getattr(value, "value", value) or UNKNOWN_LABEL


def compute_analytics(
    events: Sequence[PageViewEvent],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> AnalyticsSummary:
    """Derive the dashboard metrics from ``events`` (newest first)."""
    tz = tz or timezone.utc
    now = _as_utc(now or datetime.now(timezone.utc))
    today_date = now.astimezone(tz).date()
    today = today_date.isoformat()
    week_ago = now - WEEK_WINDOW
    month_ago = now - MONTH_WINDOW

    event_dates = [_local_date(e.created_at, tz) for e in events]
    todays = [e for e, day in zip(events, event_dates) if day == today]

    day_totals: Dict[str, int] = Counter(event_dates)
    views_by_day = []
    for offset in range(DAYS_IN_CHART - 1, -1, -1):
        day = (today_date - timedelta(days=offset)).isoformat()
        views_by_day.append(DayViews(date=day, views=day_totals.get(day, 0)))

    return AnalyticsSummary(
        today_views=len(todays),
        week_views=sum(1 for e in events if _as_utc(e.created_at) >= week_ago),
        month_views=sum(1 for e in events if _as_utc(e.created_at) >= month_ago),
        total_views=len(events),
        unique_visitors=len({e.visitor_id for e in events}),
        unique_visitors_today=len({e.visitor_id for e in todays}),
        device_counts=dict(Counter(_label(e.device_type) for e in events)),
        browser_counts=dict(Counter(_label(e.browser) for e in events)),
        page_counts=dict(Counter(e.page_path for e in events)),
        views_by_day=views_by_day,
        recent_views=list(events[:RECENT_LIMIT]),
    )
