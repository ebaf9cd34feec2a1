"""Unit tests for the build event log."""

import pytest

from folio.utils.event_logging import get_recent_events, log_build_event


@pytest.mark.unit
def test_log_and_read_events(tmp_path):
    events_file = tmp_path / "events.log"

    log_build_event("build_started", "test", events_file=events_file)
    log_build_event("build_completed", "test", events_file=events_file, pages=["index.html"])

    events = get_recent_events(events_file=events_file)
    assert [e["event_type"] for e in events] == ["build_started", "build_completed"]
    assert events[1]["pages"] == ["index.html"]
    assert "timestamp" in events[0]


@pytest.mark.unit
def test_filter_and_limit(tmp_path):
    events_file = tmp_path / "events.log"
    for i in range(5):
        log_build_event("build_completed", "test", events_file=events_file, n=i)
        log_build_event("build_failed", "test", events_file=events_file, n=i)

    completed = get_recent_events(2, event_type="build_completed", events_file=events_file)
    assert [e["n"] for e in completed] == [3, 4]


@pytest.mark.unit
def test_malformed_lines_are_skipped(tmp_path):
    events_file = tmp_path / "events.log"
    log_build_event("build_started", "test", events_file=events_file)
    with open(events_file, "a", encoding="utf-8") as f:
        f.write("not json\n")

    assert len(get_recent_events(events_file=events_file)) == 1


@pytest.mark.unit
def test_missing_file_returns_empty(tmp_path):
    assert get_recent_events(events_file=tmp_path / "missing.log") == []
