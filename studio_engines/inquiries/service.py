from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from studio_engines.common.error_envelope import not_found_error
from studio_engines.config import runtime_config
from studio_engines.inquiries.models import Inquiry, InquiryStatus, InquirySubmission
from studio_engines.inquiries.repository import (
    FirestoreInquiryRepository,
    InMemoryInquiryRepository,
    InquiryRepository,
)
from studio_engines.logging.audit import emit_audit_event

logger = logging.getLogger(__name__)


def _default_repo() -> InquiryRepository:
    if runtime_config.get_backend("INQUIRIES") == "firestore":
        try:
            return FirestoreInquiryRepository()
        except Exception as exc:
            logger.warning("Firestore inquiries unavailable; using in-memory store", exc_info=exc)
            return InMemoryInquiryRepository()
    return InMemoryInquiryRepository()


class InquiryService:
    def __init__(self, repo: Optional[InquiryRepository] = None) -> None:
        self.repo = repo or _default_repo()

    def submit_inquiry(self, payload: InquirySubmission) -> Inquiry:
        inquiry = self.repo.create(Inquiry(**payload.model_dump()))
        logger.info("inquiry received", extra={"inquiry_id": inquiry.id})
        return inquiry

    def list_inquiries(self) -> List[Inquiry]:
        return self.repo.list()

    def get_inquiry(self, inquiry_id: str) -> Inquiry:
        inquiry = self.repo.get(inquiry_id)
        if not inquiry:
            not_found_error("inquiry", inquiry_id)
        return inquiry

    def update_status(self, inquiry_id: str, status: InquiryStatus, actor: Optional[str] = None) -> Inquiry:
        inquiry = self.get_inquiry(inquiry_id)
        previous = inquiry.status
        updated = self.repo.update(inquiry.model_copy(update={"status": status, "updated_at": datetime.now(timezone.utc)}))
        emit_audit_event(
            action="inquiry.status",
            surface="inquiries",
            actor=actor,
            metadata={"inquiry_id": inquiry_id, "from": previous, "to": status},
        )
        return updated

    def delete_inquiry(self, inquiry_id: str, actor: Optional[str] = None) -> None:
        self.get_inquiry(inquiry_id)
        self.repo.delete(inquiry_id)
        emit_audit_event(action="inquiry.delete", surface="inquiries", actor=actor, metadata={"inquiry_id": inquiry_id})


_default_service: Optional[InquiryService] = None


def get_inquiry_service() -> InquiryService:
    global _default_service
    if _default_service is None:
        _default_service = InquiryService()
    return _default_service


def set_inquiry_service(service: Optional[InquiryService]) -> None:
    global _default_service
    _default_service = service
