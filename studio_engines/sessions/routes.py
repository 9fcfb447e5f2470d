from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from studio_engines.identity.auth import require_admin
from studio_engines.sessions.models import Session, SessionCreate, SessionUpdate
from studio_engines.sessions.service import get_session_service

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=List[Session])
def list_sessions(auth=Depends(require_admin)):
    return get_session_service().list_sessions()


@router.post("", status_code=201, response_model=Session)
def create_session(payload: SessionCreate, auth=Depends(require_admin)):
    return get_session_service().create_session(payload, actor=auth.email)


@router.patch("/{session_id}", response_model=Session)
def update_session(session_id: str, payload: SessionUpdate, auth=Depends(require_admin)):
    return get_session_service().update_session(session_id, payload, actor=auth.email)


@router.delete("/{session_id}")
def delete_session(session_id: str, auth=Depends(require_admin)):
    get_session_service().delete_session(session_id, actor=auth.email)
    return {"status": "deleted"}
