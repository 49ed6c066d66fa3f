# tests/test_models.py
import pytest
from pydantic import ValidationError

from analytics.models.enums import LogEventType
from analytics.models.log import LogEntry


def test_log_entry_round_trips_field_names():
    entry = LogEntry.model_validate_json('{"event_type": "search", "meta": {"q": "kyoto"}}')
    assert set(entry.model_dump()) == {"user_id", "event_type", "path", "meta", "timestamp"}
    assert entry.timestamp is None


def test_event_type_required():
    with pytest.raises(ValidationError):
        LogEntry(path="/home")


@pytest.mark.parametrize("value, known", [("view_page", True), ("conversion", True), ("page_view", False)])
def test_known_event_types(value, known):
    assert LogEventType.is_known(value) is known
