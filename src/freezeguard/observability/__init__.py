"""Watcher observability — an event trail of frozen files and late writes.

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from freezeguard.observability import EventLog, WatchCollector
    >>> collector = WatchCollector(EventLog())
    >>> # Pass collector to each ContentWatcher, then inspect collector.log

"""

from freezeguard.observability.collector import WatchCollector
from freezeguard.observability.events import (
    ContentChanged,
    WatchArmed,
    WatchEvent,
    now_ns,
)
from freezeguard.observability.log import EventLog

__all__ = [
    "ContentChanged",
    "EventLog",
    "WatchArmed",
    "WatchCollector",
    "WatchEvent",
    "now_ns",
]
