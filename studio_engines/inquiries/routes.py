from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from studio_engines.identity.auth import require_admin
from studio_engines.inquiries.models import Inquiry, InquiryStatusUpdate, InquirySubmission
from studio_engines.inquiries.service import get_inquiry_service

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.post("", status_code=201, response_model=Inquiry)
def submit_inquiry(payload: InquirySubmission):
    return get_inquiry_service().submit_inquiry(payload)


@router.get("", response_model=List[Inquiry])
def list_inquiries(auth=Depends(require_admin)):
    return get_inquiry_service().list_inquiries()


@router.patch("/{inquiry_id}/status", response_model=Inquiry)
def update_inquiry_status(inquiry_id: str, payload: InquiryStatusUpdate, auth=Depends(require_admin)):
    return get_inquiry_service().update_status(inquiry_id, payload.status, actor=auth.email)


@router.delete("/{inquiry_id}")
def delete_inquiry(inquiry_id: str, auth=Depends(require_admin)):
    get_inquiry_service().delete_inquiry(inquiry_id, actor=auth.email)
    return {"status": "deleted"}
