"""Small key/value storage capability used for visitor identity and session flags.

Browser-style storages are modelled as an injected ``{get, set}`` store so the
recorder never touches ambient globals. Over HTTP the durable store is a
long-lived cookie and the session store is a cookie without ``max_age``.
"""
from __future__ import annotations

import base64
import binascii
import json
import threading
from typing import Dict, Mapping, Optional, Protocol

from fastapi import Response

from studio_engines.common.errors import StorageUnavailable

# Browsers refuse cookies above ~4KB; stay under it with room for attributes.
MAX_COOKIE_VALUE_BYTES = 3800


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._items)


def _encode(items: Dict[str, str]) -> str:
    raw = json.dumps(items, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode(value: Optional[str]) -> Dict[str, str]:
    if not value:
        return {}
    padding = "=" * (-len(value) % 4)
    try:
        data = json.loads(base64.urlsafe_b64decode(value + padding))
    except (binascii.Error, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(k): str(v) for k, v in data.items() if isinstance(v, str)}


class CookieKeyValueStore:
    """Whole key/value map kept in a single cookie.

    Reads come from the request cookies; every ``set`` re-emits the cookie on
    the outgoing response. ``max_age=None`` makes it a session cookie.
    """

    def __init__(
        self,
        cookies: Mapping[str, str],
        response: Response,
        cookie_name: str,
        max_age: Optional[int] = None,
        secure: bool = False,
    ) -> None:
        self._cookie_name = cookie_name
        self._response = response
        self._max_age = max_age
        self._secure = secure
        self._items = _decode(cookies.get(cookie_name))

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        updated = dict(self._items)
        updated[key] = value
        encoded = _encode(updated)
        if len(encoded) > MAX_COOKIE_VALUE_BYTES:
            raise StorageUnavailable(f"cookie {self._cookie_name} would exceed browser size limit")
        self._items = updated
        self._response.set_cookie(
            self._cookie_name,
            encoded,
            max_age=self._max_age,
            httponly=True,
            samesite="lax",
            secure=self._secure,
        )
