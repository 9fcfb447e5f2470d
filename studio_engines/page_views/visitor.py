from __future__ import annotations

import logging
from uuid import uuid4

from studio_engines.common.errors import StorageUnavailable
from studio_engines.common.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

VISITOR_ID_KEY = "visitor_id"


def get_or_create_visitor_id(store: KeyValueStore) -> str:
    """Return the visitor id held in durable storage, creating it on first use.

    When the storage is unusable a fresh id is returned for this load only.
    """
    try:
        visitor_id = store.get(VISITOR_ID_KEY)
    except StorageUnavailable as exc:
        logger.warning("durable storage unavailable; using transient visitor id", exc_info=exc)
        return uuid4().hex
    if visitor_id:
        return visitor_id
    visitor_id = uuid4().hex
    try:
        store.set(VISITOR_ID_KEY, visitor_id)
    except StorageUnavailable as exc:
        logger.warning("could not persist visitor id; using it for this load only", exc_info=exc)
    return visitor_id
