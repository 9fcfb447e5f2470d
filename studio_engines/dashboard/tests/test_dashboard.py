from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from studio_engines.dashboard.service import DashboardService
from studio_engines.inquiries.models import Inquiry
from studio_engines.inquiries.repository import InMemoryInquiryRepository
from studio_engines.inquiries.service import InquiryService
from studio_engines.sessions.models import Session
from studio_engines.sessions.repository import InMemorySessionRepository
from studio_engines.sessions.service import SessionService

TODAY = date(2026, 6, 1)


def _service():
    inquiries = InMemoryInquiryRepository()
    sessions = InMemorySessionRepository()
    now = datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)
    for i, status in enumerate(["new", "new", "responded", "closed"]):
        inquiries.create(
            Inquiry(name=f"n{i}", email=f"n{i}@example.com", message="hi", status=status, created_at=now - timedelta(hours=i))
        )
    rows = [
        ("Past", "Org A", TODAY - timedelta(days=3), "completed", 30),
        ("Today", "Org B", TODAY, "scheduled", None),
        ("Soon", "Org A", TODAY + timedelta(days=2), "scheduled", 25),
        ("Cancelled", "Org C", TODAY + timedelta(days=4), "cancelled", 10),
        ("Later", "Org D", TODAY + timedelta(days=9), "scheduled", 5),
        ("Much later", "Org D", TODAY + timedelta(days=20), "scheduled", 5),
    ]
    for title, org, when, status, participants in rows:
        sessions.create(Session(title=title, organization=org, session_date=when, status=status, participants=participants))
    return DashboardService(inquiries=InquiryService(repo=inquiries), sessions=SessionService(repo=sessions))


def test_dashboard_counts():
    summary = _service().dashboard_summary(today=TODAY)
    assert summary.total_inquiries == 4
    assert summary.new_inquiries == 2
    assert summary.total_sessions == 6
    assert summary.upcoming_sessions == 4
    assert summary.total_participants == 75
    assert summary.unique_organizations == 4


def test_dashboard_previews():
    summary = _service().dashboard_summary(today=TODAY)
    assert [i.name for i in summary.recent_inquiries] == ["n0", "n1", "n2"]
    assert [s.title for s in summary.next_sessions] == ["Today", "Soon", "Later"]


def test_empty_dashboard():
    service = DashboardService(
        inquiries=InquiryService(repo=InMemoryInquiryRepository()),
        sessions=SessionService(repo=InMemorySessionRepository()),
    )
    summary = service.dashboard_summary(today=TODAY)
    assert summary.total_inquiries == 0
    assert summary.next_sessions == []
