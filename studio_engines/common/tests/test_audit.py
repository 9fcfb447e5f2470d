import pytest

from studio_engines.logging.audit import emit_audit_event, set_audit_logger


def test_audit_events_reach_sink():
    captured = []

    def sink(event):
        captured.append(event)
        return {"status": "accepted"}

    set_audit_logger(sink)
    emit_audit_event(action="inquiry.delete", surface="inquiries", actor="owner@example.com", metadata={"inquiry_id": "i1"})
    assert captured[0].action == "inquiry.delete"
    assert captured[0].actor == "owner@example.com"
    assert captured[0].metadata == {"inquiry_id": "i1"}


def test_rejected_audit_raises_only_in_strict_mode(monkeypatch):
    set_audit_logger(lambda event: {"status": "error", "error": "sink down"})
    emit_audit_event(action="session.create")
    monkeypatch.setenv("AUDIT_STRICT", "1")
    with pytest.raises(RuntimeError):
        emit_audit_event(action="session.create")
