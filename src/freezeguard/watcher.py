"""Content watcher — detects writes to a file after it was frozen.

A plugin that reads a file's content and acts on it (copying it elsewhere,
deriving metadata from it) needs that content to stay put for the rest of
the build.  ``ContentWatcher`` captures a baseline checksum when watching
starts and compares every later write against it:

- Not armed yet -> writes pass through unchecked
- Armed, same checksum -> nothing happens
- Armed, different checksum -> the change callback runs with the new content

The baseline is captured once and never slides, so writing the original
content back is not a change, and any other content always is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from freezeguard._errors import ChangeAfterFreezeError
from freezeguard.checksum import check_content, content_checksum, encode_content
from freezeguard.config import WatchConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from freezeguard._types import ChangeCallback, Checksum, Content
    from freezeguard.observability.collector import WatchCollector


class TrackedEntity(Protocol):
    """Anything with a name and a readable content buffer."""

    @property
    def name(self) -> str: ...

    @property
    def content(self) -> Content: ...


_CURRENT = object()


class ContentWatcher:
    """Watches one tracked entity for content changes after freezing.

    The watcher never owns the content.  The entity's content setter hands
    each new value to :meth:`on_content_write` together with a ``commit``
    callable that stores it.

    Args:
        entity: The file being watched.
        on_changed: Callback invoked with the new content on a divergent
            write.  Defaults to raising :class:`ChangeAfterFreezeError`.
        config: Checksum settings.  Defaults to ``WatchConfig()``.
        collector: Optional event collector for armed/changed events.

    """

    __slots__ = ("_baseline", "_callback", "_collector", "_config", "_entity")

    def __init__(
        self,
        entity: TrackedEntity,
        on_changed: ChangeCallback | None = None,
        *,
        config: WatchConfig | None = None,
        collector: WatchCollector | None = None,
    ) -> None:
        self._entity = entity
        self._callback = on_changed
        self._config = config if config is not None else WatchConfig()
        self._collector = collector
        self._baseline: Checksum | None = None

    @property
    def entity(self) -> TrackedEntity:
        """The watched entity."""
        return self._entity

    @property
    def config(self) -> WatchConfig:
        return self._config

    @property
    def baseline_checksum(self) -> Checksum | None:
        """Checksum captured by :meth:`watch`, or None before arming."""
        return self._baseline

    @property
    def is_armed(self) -> bool:
        """Whether writes are currently compared against a baseline."""
        return self._baseline is not None

    @property
    def on_changed(self) -> ChangeCallback:
        """The callback run on a divergent write."""
        if self._callback is None:
            return self._raise_change_after_freeze
        return self._callback

    @on_changed.setter
    def on_changed(self, callback: ChangeCallback) -> None:
        self.set_callback(callback)

    def set_callback(self, callback: ChangeCallback) -> None:
        """Replace the change callback.  Allowed before or after arming."""
        self._callback = callback

    def watch(self) -> None:
        """Arm the watcher by capturing the entity's current checksum.

        Idempotent: once a baseline exists, later calls keep it.

        """
        if self._baseline is not None:
            return

        self._baseline = self._checksum(self._entity.content)
        if self._collector is not None:
            self._collector.record_armed(self._entity.name, self._baseline)

    def on_content_write(
        self, new_content: Content, commit: Callable[[Content], object]
    ) -> Content:
        """Commit *new_content* and run the callback if it diverges.

        Args:
            new_content: The value being written.
            commit: Stores the value in the entity.  Called first, so the
                value stays committed even if the callback raises.

        Returns:
            *new_content*, unchanged.

        Raises:
            ContentTypeError: If *new_content* is neither text nor
                bytes-like.  Nothing is committed in that case.

        """
        check_content(new_content)
        commit(new_content)

        baseline = self._baseline
        if baseline is None:
            return new_content

        encoded = encode_content(new_content, self._config.encoding)
        checksum = self._checksum(encoded)
        if checksum != baseline:
            if self._collector is not None:
                self._collector.record_changed(
                    self._entity.name,
                    baseline=baseline,
                    checksum=checksum,
                    size_bytes=len(encoded),
                )
            self.on_changed(new_content)

        return new_content

    def has_changed(self, content: Content | object = _CURRENT) -> bool:
        """Whether *content* (default: the entity's content) differs from the baseline.

        Always False before :meth:`watch`.  Never runs the callback.

        """
        if self._baseline is None:
            return False
        if content is _CURRENT:
            content = self._entity.content
        return self._checksum(content) != self._baseline  # type: ignore[arg-type]

    def _checksum(self, content: Content) -> Checksum:
        return content_checksum(
            content,
            algorithm=self._config.algorithm,
            encoding=self._config.encoding,
        )

    def _raise_change_after_freeze(self, new_content: Content) -> None:
        raise ChangeAfterFreezeError(self._entity.name, new_content)

    def __repr__(self) -> str:
        state = "armed" if self.is_armed else "unarmed"
        return f"<ContentWatcher {self._entity.name!r} {state}>"
