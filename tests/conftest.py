"""Shared test fixtures for freezeguard."""

from __future__ import annotations

from pathlib import Path

import pytest

from freezeguard._types import Content
from freezeguard.files import InMemoryFile
from freezeguard.observability import EventLog, WatchCollector


class RecordingCallback:
    """Change callback that remembers every content it was called with."""

    def __init__(self) -> None:
        self.calls: list[Content] = []

    def __call__(self, content: Content) -> None:
        self.calls.append(content)


@pytest.fixture
def recorder() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def collector() -> WatchCollector:
    """A collector backed by a fresh EventLog."""
    return WatchCollector(EventLog())


@pytest.fixture
def perl_module() -> InMemoryFile:
    """The classic case: a module another plugin already read from."""
    return InMemoryFile("lib/Foo.pm", "package Foo;\n1;\n")


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small distribution tree on disk.

    Returns the root containing lib/Foo.pm (text) and share/logo.bin (binary).
    """
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "Foo.pm").write_text("package Foo;\n1;\n", encoding="utf-8")

    share = tmp_path / "share"
    share.mkdir()
    (share / "logo.bin").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01")

    return tmp_path
