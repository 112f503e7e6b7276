"""Event model for watcher observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- ``name``: The tracked file the event is about

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WatchArmed:
    """A watcher captured its baseline checksum.

    Attributes:
        name: Name of the tracked file.
        checksum: The baseline checksum.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    checksum: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ContentChanged:
    """Content diverging from the baseline was written to a frozen file.

    Attributes:
        name: Name of the tracked file.
        baseline: Checksum captured when watching started.
        checksum: Checksum of the newly written content.
        size_bytes: Size of the new content after encoding.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    baseline: str
    checksum: str
    size_bytes: int
    timestamp_ns: int


type WatchEvent = WatchArmed | ContentChanged


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
