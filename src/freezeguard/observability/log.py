"""Event log — queryable, bounded event store.

Stores a ring buffer of ``WatchEvent`` objects for inspection after a
build.  Supports querying by event type and file name.

Thread Safety:
    All methods are protected by a ``threading.Lock`` so one log can be
    shared by every watcher in a pipeline.

"""

import threading
from collections import deque
from typing import Any

from freezeguard.observability.events import WatchEvent


class EventLog:
    """Bounded event store with query support.

    Events are stored in a ring buffer (deque with maxlen).  When the
    buffer is full, the oldest events are discarded automatically.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[WatchEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: WatchEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        name: str | None = None,
        limit: int = 100,
    ) -> list[WatchEvent]:
        """Query events with optional filters.

        Args:
            event_type: Only return events of this type.
            name: Only return events whose file name contains this string.
            limit: Maximum number of events to return.

        Returns:
            List of matching events, most recent first.

        """
        with self._lock:
            results: list[WatchEvent] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break
                if event_type is not None and not isinstance(event, event_type):
                    continue
                if name is not None and name not in event.name:
                    continue
                results.append(event)
            return results

    def recent(self, n: int = 20) -> list[WatchEvent]:
        """Return the N most recent events, oldest first."""
        if n <= 0:
            return []
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def clear(self) -> int:
        """Clear all events and return the count that was cleared."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Return summary statistics about stored events."""
        with self._lock:
            events = list(self._events)

        type_counts: dict[str, int] = {}
        names: set[str] = set()
        for event in events:
            kind = type(event).__name__
            type_counts[kind] = type_counts.get(kind, 0) + 1
            names.add(event.name)

        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": type_counts,
            "files": len(names),
        }
