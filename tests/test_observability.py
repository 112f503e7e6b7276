"""Tests for freezeguard.observability — watcher event trail."""

import pytest

from freezeguard.observability.collector import WatchCollector
from freezeguard.observability.events import ContentChanged, WatchArmed, now_ns
from freezeguard.observability.log import EventLog


def _armed(name: str) -> WatchArmed:
    return WatchArmed(name=name, checksum="0" * 32, timestamp_ns=now_ns())


def _changed(name: str) -> ContentChanged:
    return ContentChanged(
        name=name, baseline="0" * 32, checksum="1" * 32, size_bytes=4,
        timestamp_ns=now_ns(),
    )


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class TestEvents:
    """Events are frozen and timestamped."""

    def test_frozen(self) -> None:
        event = _armed("lib/Foo.pm")
        with pytest.raises(AttributeError):
            event.name = "other"  # type: ignore[misc]

    def test_now_ns_monotonic(self) -> None:
        first = now_ns()
        assert now_ns() >= first


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_armed("lib/Foo.pm"))
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_armed(f"lib/{i}.pm"))
        assert len(log) == 5
        assert log.recent(1)[0].name == "lib/9.pm"

    def test_recent(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_armed(f"lib/{i}.pm"))
        recent = log.recent(3)
        assert [event.name for event in recent] == ["lib/2.pm", "lib/3.pm", "lib/4.pm"]

    def test_recent_zero_is_empty(self) -> None:
        log = EventLog()
        log.append(_armed("lib/A.pm"))
        assert log.recent(0) == []
        assert log.recent(-1) == []

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_armed("lib/A.pm"))
        log.append(_changed("lib/A.pm"))
        log.append(_armed("lib/B.pm"))

        results = log.query(event_type=WatchArmed)
        assert len(results) == 2
        assert all(isinstance(r, WatchArmed) for r in results)

    def test_query_newest_first(self) -> None:
        log = EventLog()
        log.append(_armed("lib/A.pm"))
        log.append(_armed("lib/B.pm"))
        assert [e.name for e in log.query()] == ["lib/B.pm", "lib/A.pm"]

    def test_query_by_name_substring(self) -> None:
        log = EventLog()
        log.append(_armed("lib/Foo.pm"))
        log.append(_armed("lib/Foo/Bar.pm"))
        log.append(_armed("Makefile.PL"))
        assert len(log.query(name="lib/Foo")) == 2

    def test_query_limit(self) -> None:
        log = EventLog()
        for i in range(10):
            log.append(_changed(f"lib/{i}.pm"))
        assert len(log.query(limit=3)) == 3

    def test_clear(self) -> None:
        log = EventLog()
        log.append(_armed("a"))
        log.append(_armed("b"))
        assert log.clear() == 2
        assert len(log) == 0

    def test_stats(self) -> None:
        log = EventLog(max_events=50)
        log.append(_armed("lib/A.pm"))
        log.append(_armed("lib/B.pm"))
        log.append(_changed("lib/B.pm"))
        stats = log.stats()
        assert stats["total"] == 3
        assert stats["max_events"] == 50
        assert stats["by_type"] == {"WatchArmed": 2, "ContentChanged": 1}
        assert stats["files"] == 2


# ---------------------------------------------------------------------------
# WatchCollector
# ---------------------------------------------------------------------------


class TestWatchCollector:
    """The collector turns watcher calls into events."""

    def test_default_log_created(self) -> None:
        assert isinstance(WatchCollector().log, EventLog)

    def test_uses_given_log(self) -> None:
        log = EventLog()
        assert WatchCollector(log).log is log

    def test_record_armed(self) -> None:
        collector = WatchCollector()
        collector.record_armed("lib/Foo.pm", "abc")
        (event,) = collector.log.recent()
        assert isinstance(event, WatchArmed)
        assert event.name == "lib/Foo.pm"
        assert event.checksum == "abc"
        assert event.timestamp_ns > 0

    def test_record_changed(self) -> None:
        collector = WatchCollector()
        collector.record_changed("lib/Foo.pm", baseline="abc", checksum="def", size_bytes=17)
        (event,) = collector.log.recent()
        assert isinstance(event, ContentChanged)
        assert event.baseline == "abc"
        assert event.checksum == "def"
        assert event.size_bytes == 17
