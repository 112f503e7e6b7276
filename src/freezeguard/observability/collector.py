"""Watch collector — records watcher activity into an event log.

Watchers hold an optional collector and call it when they arm and when
they detect a change.  Several watchers may share one collector so a
build can report every frozen file and every late mutation in one place.

"""

from __future__ import annotations

from freezeguard.observability.events import ContentChanged, WatchArmed, now_ns
from freezeguard.observability.log import EventLog


class WatchCollector:
    """Event collector shared by content watchers.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_armed(self, name: str, checksum: str) -> None:
        """Record that a file's baseline checksum was captured."""
        self._log.append(WatchArmed(name=name, checksum=checksum, timestamp_ns=now_ns()))

    def record_changed(
        self,
        name: str,
        *,
        baseline: str,
        checksum: str,
        size_bytes: int = 0,
    ) -> None:
        """Record a write that diverged from the baseline."""
        self._log.append(
            ContentChanged(
                name=name,
                baseline=baseline,
                checksum=checksum,
                size_bytes=size_bytes,
                timestamp_ns=now_ns(),
            )
        )
