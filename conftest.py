import os
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("AUTH_JWT_SIGNING", "test-secret")
os.environ.setdefault("ANALYTICS_TZ", "UTC")
for backend in ("PAGE_VIEWS", "SITE_CONTENT", "INQUIRIES", "SESSIONS", "GALLERY", "GALLERY_LINKS"):
    os.environ.setdefault(f"{backend}_BACKEND", "memory")


@pytest.fixture(autouse=True)
def _reset_services():
    from studio_engines.dashboard.service import set_dashboard_service
    from studio_engines.gallery.service import set_gallery_service
    from studio_engines.gallery_links.service import set_gallery_link_service
    from studio_engines.inquiries.service import set_inquiry_service
    from studio_engines.logging.audit import set_audit_logger
    from studio_engines.page_views.service import set_page_view_service
    from studio_engines.sessions.service import set_session_service
    from studio_engines.site_content.service import set_site_content_service

    yield
    set_page_view_service(None)
    set_site_content_service(None)
    set_inquiry_service(None)
    set_session_service(None)
    set_dashboard_service(None)
    set_gallery_service(None)
    set_gallery_link_service(None)
    set_audit_logger(None)
