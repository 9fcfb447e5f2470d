from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import BackgroundTasks

from studio_engines.common.errors import RepositoryError
from studio_engines.config import runtime_config
from studio_engines.page_views.aggregator import compute_analytics
from studio_engines.page_views.models import AnalyticsReport, PageViewCreate, PageViewEvent
from studio_engines.page_views.recorder import ClientEnvironment, PageViewRecorder
from studio_engines.page_views.repository import (
    FirestorePageViewRepository,
    InMemoryPageViewRepository,
    PageViewRepository,
)

logger = logging.getLogger(__name__)


def _default_repo() -> PageViewRepository:
    if runtime_config.get_backend("PAGE_VIEWS") == "firestore":
        try:
            return FirestorePageViewRepository()
        except Exception as exc:
            logger.warning("Firestore page views unavailable; using in-memory store", exc_info=exc)
            return InMemoryPageViewRepository()
    return InMemoryPageViewRepository()


class PageViewService:
    def __init__(self, repo: Optional[PageViewRepository] = None) -> None:
        self.repo = repo or _default_repo()
        self.recorder = PageViewRecorder(submit=self.submit_page_view)

    def submit_page_view(self, record: PageViewCreate) -> PageViewEvent:
        event = self.repo.insert(record)
        logger.debug("page view recorded", extra={"page_view_id": event.id, "page_path": event.page_path})
        return event

    def track_page_view(self, page_path: str, client: ClientEnvironment, background_tasks: BackgroundTasks) -> bool:
        return self.recorder.schedule_page_view(page_path, client, background_tasks)

    def fetch_all_page_views(self) -> List[PageViewEvent]:
        """All events, newest first. Raises RepositoryError when the store fails."""
        return self.repo.select_all()

    def analytics_report(self, now: Optional[datetime] = None) -> AnalyticsReport:
        tz = runtime_config.get_analytics_timezone()
        try:
            events = self.fetch_all_page_views()
        except RepositoryError as exc:
            logger.warning("analytics read failed: %s", exc.message)
            return AnalyticsReport(status="error", error=exc.message, summary=compute_analytics([], now=now, tz=tz))
        return AnalyticsReport(summary=compute_analytics(events, now=now, tz=tz))


_default_service: Optional[PageViewService] = None


def get_page_view_service() -> PageViewService:
    global _default_service
    if _default_service is None:
        _default_service = PageViewService()
    return _default_service


def set_page_view_service(service: Optional[PageViewService]) -> None:
    global _default_service
    _default_service = service
