"""Content fingerprinting for change detection.

Content is always reduced to a canonical byte sequence before hashing, so
``"café"`` and ``"café".encode("utf-8")`` yield the same checksum.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from freezeguard._errors import ContentTypeError

if TYPE_CHECKING:
    from freezeguard._types import Checksum, Content

DEFAULT_ALGORITHM = "md5"
DEFAULT_ENCODING = "utf-8"


def encode_content(content: Content, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Return the canonical bytes for *content*.

    Text is encoded with *encoding*; bytes-like values are used as-is.
    Text the encoding cannot represent (lone surrogates, characters outside
    a narrow codec) falls back to UTF-8 with ``surrogatepass``, so every
    ``str`` has stable bytes.

    Raises:
        ContentTypeError: If *content* is neither text nor bytes-like.

    """
    if isinstance(content, str):
        try:
            return content.encode(encoding)
        except UnicodeEncodeError:
            return content.encode("utf-8", "surrogatepass")
    if isinstance(content, bytes):
        return content
    if isinstance(content, (bytearray, memoryview)):
        return bytes(content)
    raise _unsupported(content)


def check_content(content: object) -> None:
    """Raise ContentTypeError unless *content* is text or bytes-like."""
    if not isinstance(content, (str, bytes, bytearray, memoryview)):
        raise _unsupported(content)


def _unsupported(content: object) -> ContentTypeError:
    return ContentTypeError(
        f"cannot fingerprint content of type {type(content).__name__!r}"
    )


def content_checksum(
    content: Content,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    encoding: str = DEFAULT_ENCODING,
) -> Checksum:
    """Hex digest of *content* after canonical encoding.

    The digest is not used for security, only to tell two contents apart.

    """
    hasher = hashlib.new(algorithm, usedforsecurity=False)
    hasher.update(encode_content(content, encoding))
    return hasher.hexdigest()
