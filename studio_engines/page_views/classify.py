"""User-agent classification applied once, when a page view is recorded.

Rule order matters in both classifiers: tablet tokens are checked before
mobile tokens (iPad user agents also say "Mobile"), and Chrome, Safari and
Edge user agents contain each other's names.
"""
from __future__ import annotations

import re
from typing import Optional

from studio_engines.page_views.models import Browser, DeviceType

TABLET_PATTERN = re.compile(r"tablet|ipad|playbook|silk", re.IGNORECASE)
MOBILE_PATTERN = re.compile(
    r"mobile|iphone|ipod|android|blackberry|opera mini|windows ce|palm|smartphone|iemobile",
    re.IGNORECASE,
)


def classify_device(user_agent: Optional[str]) -> DeviceType:
    ua = user_agent or ""
    if TABLET_PATTERN.search(ua):
        return DeviceType.TABLET
    if MOBILE_PATTERN.search(ua):
        return DeviceType.MOBILE
    return DeviceType.DESKTOP


def classify_browser(user_agent: Optional[str]) -> Browser:
    ua = user_agent or ""
    if "Firefox" in ua:
        return Browser.FIREFOX
    if "Chrome" in ua and "Edg" not in ua:
        return Browser.CHROME
    if "Safari" in ua and "Chrome" not in ua:
        return Browser.SAFARI
    if "Edg" in ua:
        return Browser.EDGE
    if "Opera" in ua or "OPR" in ua:
        return Browser.OPERA
    return Browser.OTHER
