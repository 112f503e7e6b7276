"""Tracked files whose content writes are routed through a ContentWatcher.

``ChangeNotification`` is the mixin: it owns a lazily created watcher and a
``content`` property whose setter hands every write to
:meth:`ContentWatcher.on_content_write`.  Concrete files only say how
content is read and stored.

Typical plugin usage::

    source = InMemoryFile("lib/Foo.pm", "package Foo;\\n1;\\n")
    source.on_changed = lambda content: report(source.name)
    source.watch_file()
    ...
    source.content = "package Foo;\\n2;\\n"   # -> report("lib/Foo.pm")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from freezeguard.checksum import encode_content
from freezeguard.watcher import ContentWatcher

if TYPE_CHECKING:
    from freezeguard._types import ChangeCallback, Content
    from freezeguard.config import WatchConfig
    from freezeguard.observability.collector import WatchCollector


class ChangeNotification:
    """Mixin giving a file change notification after it is frozen.

    Subclasses provide ``name``, ``_read_content()`` and
    ``_store_content(value)``.

    Args:
        watch_config: Checksum settings for the file's watcher.
        collector: Optional event collector shared across files.

    """

    name: str

    def __init__(
        self,
        *,
        watch_config: WatchConfig | None = None,
        collector: WatchCollector | None = None,
    ) -> None:
        self._watch_config = watch_config
        self._collector = collector
        self._watcher: ContentWatcher | None = None

    @property
    def watcher(self) -> ContentWatcher:
        """The file's watcher, created on first access."""
        if self._watcher is None:
            self._watcher = ContentWatcher(
                self, config=self._watch_config, collector=self._collector
            )
        return self._watcher

    @property
    def content(self) -> Content:
        return self._read_content()

    @content.setter
    def content(self, value: Content) -> None:
        self.watcher.on_content_write(value, self._store_content)

    @property
    def encoded_content(self) -> bytes:
        """Content as the bytes that get fingerprinted."""
        return encode_content(self.content, self.watcher.config.encoding)

    @property
    def on_changed(self) -> ChangeCallback:
        """Callback run with the new content when the frozen file changes."""
        return self.watcher.on_changed

    @on_changed.setter
    def on_changed(self, callback: ChangeCallback) -> None:
        self.watcher.set_callback(callback)

    def watch_file(self) -> None:
        """Freeze the current content; every later divergent write notifies."""
        self.watcher.watch()

    def _read_content(self) -> Content:
        raise NotImplementedError

    def _store_content(self, value: Content) -> None:
        raise NotImplementedError


class InMemoryFile(ChangeNotification):
    """A file whose content only ever lives in memory."""

    def __init__(
        self,
        name: str,
        content: Content = "",
        *,
        watch_config: WatchConfig | None = None,
        collector: WatchCollector | None = None,
    ) -> None:
        super().__init__(watch_config=watch_config, collector=collector)
        self.name = name
        self._content = content

    def _read_content(self) -> Content:
        return self._content

    def _store_content(self, value: Content) -> None:
        self._content = value

    def __repr__(self) -> str:
        return f"InMemoryFile({self.name!r})"


class OnDiskFile(ChangeNotification):
    """A file whose initial content is read lazily from disk.

    Content is loaded on first access and kept in memory from then on.
    Writes are never flushed back to disk.

    Args:
        name: Name of the file in the build, e.g. ``lib/Foo.pm``.
        path: Where to read from.  Defaults to ``name``.
        encoding: Text encoding used to decode the file, or None to keep
            the raw bytes.

    """

    def __init__(
        self,
        name: str,
        path: Path | str | None = None,
        *,
        encoding: str | None = "utf-8",
        watch_config: WatchConfig | None = None,
        collector: WatchCollector | None = None,
    ) -> None:
        super().__init__(watch_config=watch_config, collector=collector)
        self.name = name
        self.path = Path(path) if path is not None else Path(name)
        self.encoding = encoding
        self._content: Content | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether the content has been read (or assigned) yet."""
        return self._content is not None

    def _read_content(self) -> Content:
        if self._content is None:
            if self.encoding is None:
                self._content = self.path.read_bytes()
            else:
                self._content = self.path.read_text(encoding=self.encoding)
        return self._content

    def _store_content(self, value: Content) -> None:
        self._content = value

    def __repr__(self) -> str:
        return f"OnDiskFile({self.name!r}, path={str(self.path)!r})"
