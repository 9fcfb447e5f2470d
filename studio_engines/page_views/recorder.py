from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import BackgroundTasks

from studio_engines.common.errors import RepositoryError, StorageUnavailable
from studio_engines.common.kv_store import KeyValueStore
from studio_engines.page_views.classify import classify_browser, classify_device
from studio_engines.page_views.models import PageViewCreate, PageViewEvent
from studio_engines.page_views.visitor import get_or_create_visitor_id

logger = logging.getLogger(__name__)

SESSION_FLAG_PREFIX = "pageview_"
SESSION_FLAG_VALUE = "true"


def session_flag_key(page_path: str) -> str:
    return f"{SESSION_FLAG_PREFIX}{page_path}"


@dataclass
class ClientEnvironment:
    """What the recorder can see of the visiting browser."""

    local_storage: KeyValueStore
    session_storage: KeyValueStore
    user_agent: Optional[str] = None
    referrer: Optional[str] = None


class PageViewRecorder:
    """Records at most one page view per page path per browsing session.

    The flag check and the flag write are separate steps, so two concurrent
    loads of the same page in one session can both record.
    """

    def __init__(self, submit: Callable[[PageViewCreate], PageViewEvent]) -> None:
        self._submit = submit

    def record_page_view_once(self, page_path: str, client: ClientEnvironment) -> Optional[PageViewEvent]:
        """Record synchronously; a store failure propagates as RepositoryError."""
        record = self._claim(page_path, client)
        if record is None:
            return None
        return self._submit(record)

    def schedule_page_view(
        self,
        page_path: str,
        client: ClientEnvironment,
        background_tasks: BackgroundTasks,
    ) -> bool:
        """Claim the session flag now and defer the store write until after the response."""
        record = self._claim(page_path, client)
        if record is None:
            return False
        background_tasks.add_task(self._submit_quietly, record)
        return True

    def _submit_quietly(self, record: PageViewCreate) -> None:
        try:
            self._submit(record)
        except RepositoryError as exc:
            logger.warning(
                "page view dropped: %s",
                exc.message,
                extra={"page_path": record.page_path, "visitor_id": record.visitor_id},
            )

    def _claim(self, page_path: str, client: ClientEnvironment) -> Optional[PageViewCreate]:
        """Build the event for this load, or None if the session already has one.

        The session flag is set before the write is attempted, so a failed
        write is not retried within the same session.
        """
        flag_key = session_flag_key(page_path)
        try:
            if client.session_storage.get(flag_key):
                return None
        except StorageUnavailable as exc:
            logger.warning("session storage unavailable; recording without dedupe", exc_info=exc)

        visitor_id = get_or_create_visitor_id(client.local_storage)
        user_agent = client.user_agent or None
        record = PageViewCreate(
            page_path=page_path,
            visitor_id=visitor_id,
            user_agent=user_agent,
            referrer=client.referrer or None,
            device_type=classify_device(user_agent),
            browser=classify_browser(user_agent),
        )

        try:
            client.session_storage.set(flag_key, SESSION_FLAG_VALUE)
        except StorageUnavailable as exc:
            logger.warning("could not set session flag for %s", page_path, exc_info=exc)
        return record
