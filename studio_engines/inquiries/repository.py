from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from studio_engines.common.errors import RepositoryError
from studio_engines.inquiries.models import Inquiry

RESOURCE_KIND = "inquiry"


class InquiryRepository(Protocol):
    def create(self, inquiry: Inquiry) -> Inquiry: ...
    def get(self, inquiry_id: str) -> Optional[Inquiry]: ...
    def list(self) -> List[Inquiry]: ...
    def update(self, inquiry: Inquiry) -> Inquiry: ...
    def delete(self, inquiry_id: str) -> None: ...


class InMemoryInquiryRepository:
    backend = "memory"

    def __init__(self) -> None:
        self._items: Dict[str, Inquiry] = {}
        self._lock = threading.Lock()

    def create(self, inquiry: Inquiry) -> Inquiry:
        with self._lock:
            self._items[inquiry.id] = inquiry
        return inquiry

    def get(self, inquiry_id: str) -> Optional[Inquiry]:
        with self._lock:
            return self._items.get(inquiry_id)

    def list(self) -> List[Inquiry]:
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda i: i.created_at, reverse=True)

    def update(self, inquiry: Inquiry) -> Inquiry:
        with self._lock:
            self._items[inquiry.id] = inquiry
        return inquiry

    def delete(self, inquiry_id: str) -> None:
        with self._lock:
            self._items.pop(inquiry_id, None)


class FirestoreInquiryRepository:
    """Firestore implementation."""

    backend = "firestore"

    def __init__(self, client: Optional[object] = None) -> None:  # pragma: no cover - optional dep
        try:
            from google.cloud import firestore  # type: ignore
        except Exception as exc:
            raise RuntimeError("google-cloud-firestore not installed") from exc
        from studio_engines.config import runtime_config

        project = runtime_config.get_firestore_project()
        if client is None and not project:
            raise RuntimeError("GCP project is required for Firestore inquiries")
        self._firestore = firestore
        self._client = client or firestore.Client(project=project)  # type: ignore[arg-type]
        self._collection = "inquiries"

    def _col(self):
        return self._client.collection(self._collection)

    def create(self, inquiry: Inquiry) -> Inquiry:
        try:
            self._col().document(inquiry.id).set(inquiry.model_dump())
        except Exception as exc:
            raise RepositoryError(f"inquiry write failed: {exc}", RESOURCE_KIND) from exc
        return inquiry

    def get(self, inquiry_id: str) -> Optional[Inquiry]:
        try:
            snap = self._col().document(inquiry_id).get()
        except Exception as exc:
            raise RepositoryError(f"inquiry read failed: {exc}", RESOURCE_KIND) from exc
        if snap and snap.exists:
            return Inquiry(**snap.to_dict())
        return None

    def list(self) -> List[Inquiry]:
        query = self._col().order_by("created_at", direction=self._firestore.Query.DESCENDING)
        try:
            return [Inquiry(**d.to_dict()) for d in query.stream()]
        except Exception as exc:
            raise RepositoryError(f"inquiry read failed: {exc}", RESOURCE_KIND) from exc

    def update(self, inquiry: Inquiry) -> Inquiry:
        return self.create(inquiry)

    def delete(self, inquiry_id: str) -> None:
        try:
            self._col().document(inquiry_id).delete()
        except Exception as exc:
            raise RepositoryError(f"inquiry delete failed: {exc}", RESOURCE_KIND) from exc
