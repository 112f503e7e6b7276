"""Freezeguard error hierarchy.

All freezeguard-specific errors inherit from FreezeGuardError for easy catching.
"""


class FreezeGuardError(Exception):
    """Base error for all freezeguard operations."""


class ConfigError(FreezeGuardError):
    """Invalid or missing configuration."""


class ContentTypeError(FreezeGuardError, TypeError):
    """Content is neither text nor bytes-like, so it cannot be fingerprinted."""


class ChangeAfterFreezeError(FreezeGuardError):
    """A watched file's content changed after it was frozen.

    Raised by the default change callback.  ``name`` identifies the file,
    ``content`` is the value that was just written (if known).
    """

    def __init__(self, name: str, content: object = None) -> None:
        self.name = name
        self.content = content
        super().__init__(f"content of {name} has changed!")
