"""Freezeguard — change notification for frozen build files.

A build plugin that reads a file and acts on its content can freeze that
file.  Any later phase writing different content to it triggers a callback
(by default a ``ChangeAfterFreezeError``), which surfaces plugin-ordering
bugs at the point of the offending write.

Quick start::

    from freezeguard import InMemoryFile

    source = InMemoryFile("lib/Foo.pm", "package Foo;\\n1;\\n")
    source.watch_file()
    source.content = "package Foo;\\n2;\\n"   # raises ChangeAfterFreezeError

Bring your own file class by routing its content setter through a
``ContentWatcher``::

    watcher = ContentWatcher(my_file, on_changed=handle_change)
    watcher.watch()
    watcher.on_content_write(new_content, my_file.store)

"""

__version__ = "0.1.0"
__all__ = [
    "ChangeAfterFreezeError",
    "ChangeNotification",
    "ConfigError",
    "ContentTypeError",
    "ContentWatcher",
    "FreezeGuardError",
    "InMemoryFile",
    "OnDiskFile",
    "WatchConfig",
    "__version__",
    "content_checksum",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import freezeguard`` fast while providing a flat top-level API.
    """
    if name in (
        "ChangeAfterFreezeError",
        "ConfigError",
        "ContentTypeError",
        "FreezeGuardError",
    ):
        from freezeguard import _errors

        return getattr(_errors, name)

    if name == "ContentWatcher":
        from freezeguard.watcher import ContentWatcher

        return ContentWatcher

    if name in ("ChangeNotification", "InMemoryFile", "OnDiskFile"):
        from freezeguard import files

        return getattr(files, name)

    if name == "WatchConfig":
        from freezeguard.config import WatchConfig

        return WatchConfig

    if name == "content_checksum":
        from freezeguard.checksum import content_checksum

        return content_checksum

    if name == "load_config":
        from freezeguard.config_loader import load_config

        return load_config

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
