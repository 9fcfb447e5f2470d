"""Admin landing-page counters over inquiries and sessions."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from studio_engines.config import runtime_config
from studio_engines.dashboard.models import DashboardSummary
from studio_engines.inquiries.service import InquiryService, get_inquiry_service
from studio_engines.sessions.service import SessionService, get_session_service

PREVIEW_LIMIT = 3


class DashboardService:
    def __init__(
        self,
        inquiries: Optional[InquiryService] = None,
        sessions: Optional[SessionService] = None,
    ) -> None:
        self._inquiries = inquiries
        self._sessions = sessions

    @property
    def inquiries(self) -> InquiryService:
        return self._inquiries or get_inquiry_service()

    @property
    def sessions(self) -> SessionService:
        return self._sessions or get_session_service()

    def dashboard_summary(self, today: Optional[date] = None) -> DashboardSummary:
        today = today or datetime.now(runtime_config.get_analytics_timezone()).date()
        inquiries = self.inquiries.list_inquiries()
        sessions = self.sessions.list_sessions()
        upcoming = [s for s in sessions if s.session_date >= today and s.status == "scheduled"]
        return DashboardSummary(
            total_inquiries=len(inquiries),
            new_inquiries=sum(1 for i in inquiries if i.status == "new"),
            total_sessions=len(sessions),
            upcoming_sessions=len(upcoming),
            total_participants=sum(s.participants or 0 for s in sessions),
            unique_organizations=len({s.organization for s in sessions}),
            recent_inquiries=inquiries[:PREVIEW_LIMIT],
            next_sessions=upcoming[:PREVIEW_LIMIT],
        )


_default_service: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    global _default_service
    if _default_service is None:
        _default_service = DashboardService()
    return _default_service


def set_dashboard_service(service: Optional[DashboardService]) -> None:
    global _default_service
    _default_service = service
