from __future__ import annotations

from fastapi import APIRouter, Depends

from studio_engines.dashboard.models import DashboardSummary
from studio_engines.dashboard.service import get_dashboard_service
from studio_engines.identity.auth import require_admin

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
def dashboard(auth=Depends(require_admin)):
    return get_dashboard_service().dashboard_summary()
