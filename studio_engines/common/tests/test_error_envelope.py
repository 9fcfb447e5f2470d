import pytest
from fastapi import HTTPException

from studio_engines.common.error_envelope import build_error_envelope, error_response, not_found_error


def test_build_error_envelope_defaults():
    envelope = build_error_envelope("inquiry.invalid", "bad input")
    assert envelope.error.http_status == 400
    assert envelope.error.details == {}


def test_error_response_raises_http_exception():
    with pytest.raises(HTTPException) as exc_info:
        error_response("store.unavailable", "offline", status_code=503, resource_kind="page_view")
    assert exc_info.value.status_code == 503
    assert exc_info.value.detail["error"]["resource_kind"] == "page_view"


def test_not_found_error():
    with pytest.raises(HTTPException) as exc_info:
        not_found_error("session", "s1")
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail["error"]["code"] == "session.not_found"
