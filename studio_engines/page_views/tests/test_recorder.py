import pytest

from studio_engines.common.errors import RepositoryError, StorageUnavailable
from studio_engines.common.kv_store import InMemoryKeyValueStore
from studio_engines.page_views.models import Browser, DeviceType, PageViewEvent
from studio_engines.page_views.recorder import ClientEnvironment, PageViewRecorder, session_flag_key
from studio_engines.page_views.visitor import VISITOR_ID_KEY

EDGE_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
)


class CaptureSubmit:
    def __init__(self, fail: bool = False):
        self.records = []
        self.fail = fail

    def __call__(self, record):
        self.records.append(record)
        if self.fail:
            raise RepositoryError("store offline", "page_view")
        return PageViewEvent(**record.model_dump())


class BrokenStore:
    def get(self, key):
        raise StorageUnavailable("disabled")

    def set(self, key, value):
        raise StorageUnavailable("disabled")


def _client(**kwargs):
    defaults = {
        "local_storage": InMemoryKeyValueStore(),
        "session_storage": InMemoryKeyValueStore(),
        "user_agent": EDGE_UA,
        "referrer": "https://www.google.com/",
    }
    defaults.update(kwargs)
    return ClientEnvironment(**defaults)


def test_records_once_per_path_per_session():
    submit = CaptureSubmit()
    recorder = PageViewRecorder(submit)
    client = _client()

    first = recorder.record_page_view_once("/", client)
    second = recorder.record_page_view_once("/", client)

    assert first is not None
    assert second is None
    assert len(submit.records) == 1


def test_distinct_paths_are_recorded_separately():
    submit = CaptureSubmit()
    recorder = PageViewRecorder(submit)
    client = _client()
    recorder.record_page_view_once("/", client)
    recorder.record_page_view_once("/admin", client)
    assert [r.page_path for r in submit.records] == ["/", "/admin"]


def test_new_session_records_again_with_same_visitor():
    submit = CaptureSubmit()
    recorder = PageViewRecorder(submit)
    local = InMemoryKeyValueStore()
    recorder.record_page_view_once("/", _client(local_storage=local))
    recorder.record_page_view_once("/", _client(local_storage=local))
    assert len(submit.records) == 2
    assert submit.records[0].visitor_id == submit.records[1].visitor_id == local.get(VISITOR_ID_KEY)


def test_event_fields_are_classified_at_record_time():
    submit = CaptureSubmit()
    PageViewRecorder(submit).record_page_view_once("/", _client())
    record = submit.records[0]
    assert record.device_type == DeviceType.DESKTOP
    assert record.browser == Browser.EDGE
    assert record.user_agent == EDGE_UA
    assert record.referrer == "https://www.google.com/"
    assert record.country is None and record.city is None


def test_empty_referrer_is_absent():
    submit = CaptureSubmit()
    PageViewRecorder(submit).record_page_view_once("/", _client(referrer="", user_agent=None))
    record = submit.records[0]
    assert record.referrer is None
    assert record.user_agent is None
    assert record.device_type == DeviceType.DESKTOP
    assert record.browser == Browser.OTHER


def test_submit_failure_propagates_and_is_not_retried():
    submit = CaptureSubmit(fail=True)
    recorder = PageViewRecorder(submit)
    session = InMemoryKeyValueStore()
    client = _client(session_storage=session)

    with pytest.raises(RepositoryError):
        recorder.record_page_view_once("/", client)

    assert session.get(session_flag_key("/")) == "true"
    assert recorder.record_page_view_once("/", client) is None
    assert len(submit.records) == 1


def test_unavailable_session_storage_records_without_dedupe():
    submit = CaptureSubmit()
    recorder = PageViewRecorder(submit)
    client = _client(session_storage=BrokenStore(), local_storage=BrokenStore())
    recorder.record_page_view_once("/", client)
    recorder.record_page_view_once("/", client)
    assert len(submit.records) == 2
    assert all(r.visitor_id for r in submit.records)
