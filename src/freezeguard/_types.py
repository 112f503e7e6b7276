"""Shared type definitions for freezeguard."""

from collections.abc import Callable

# Anything a tracked file may hold as its content
type Content = str | bytes | bytearray | memoryview

# Hex digest identifying a piece of content
type Checksum = str

# Invoked with the newly written content when a frozen file changes
type ChangeCallback = Callable[[Content], object]
