from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Header, Request, Response

from studio_engines.common.kv_store import CookieKeyValueStore
from studio_engines.config import runtime_config
from studio_engines.identity.auth import require_admin
from studio_engines.page_views.models import (
    AnalyticsReport,
    PageViewEvent,
    TrackPageViewRequest,
    TrackPageViewResponse,
)
from studio_engines.page_views.recorder import ClientEnvironment
from studio_engines.page_views.service import get_page_view_service

LOCAL_STORAGE_COOKIE = "studio_local"
SESSION_STORAGE_COOKIE = "studio_session"

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _client_environment(
    request: Request,
    response: Response,
    user_agent: Optional[str],
    referrer: Optional[str],
) -> ClientEnvironment:
    secure = runtime_config.cookie_secure()
    return ClientEnvironment(
        local_storage=CookieKeyValueStore(
            request.cookies,
            response,
            LOCAL_STORAGE_COOKIE,
            max_age=runtime_config.get_visitor_cookie_max_age(),
            secure=secure,
        ),
        session_storage=CookieKeyValueStore(request.cookies, response, SESSION_STORAGE_COOKIE, secure=secure),
        user_agent=user_agent,
        referrer=referrer,
    )


@router.post("/pageviews/track", status_code=202, response_model=TrackPageViewResponse)
def track_page_view(
    payload: TrackPageViewRequest,
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    user_agent: Optional[str] = Header(default=None, alias="User-Agent"),
):
    client = _client_environment(request, response, user_agent, payload.referrer)
    queued = get_page_view_service().track_page_view(payload.page_path, client, background_tasks)
    return TrackPageViewResponse(status="queued" if queued else "skipped", page_path=payload.page_path)


@router.get("/pageviews", response_model=List[PageViewEvent])
def list_page_views(auth=Depends(require_admin)):
    return get_page_view_service().fetch_all_page_views()


@router.get("/summary", response_model=AnalyticsReport)
def analytics_summary(auth=Depends(require_admin)):
    return get_page_view_service().analytics_report()
