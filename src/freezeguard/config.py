"""Freezeguard configuration.

WatchConfig controls how content is fingerprinted, frozen after creation.
"""

import codecs
import hashlib
from dataclasses import dataclass

from freezeguard._errors import ConfigError
from freezeguard.checksum import DEFAULT_ALGORITHM, DEFAULT_ENCODING


@dataclass(frozen=True, slots=True)
class WatchConfig:
    """Configuration for content watchers.

    Attributes:
        algorithm: Name of the ``hashlib`` algorithm used for checksums.
            Normalized to lower case on construction.
        encoding: Text encoding used to turn ``str`` content into bytes
            before hashing.

    """

    algorithm: str = DEFAULT_ALGORITHM
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if not isinstance(self.algorithm, str) or not isinstance(self.encoding, str):
            msg = "algorithm and encoding must be strings"
            raise ConfigError(msg)

        algorithm = self.algorithm.lower()
        if algorithm not in hashlib.algorithms_available:
            msg = f"unknown hash algorithm {self.algorithm!r}"
            raise ConfigError(msg)
        if algorithm.startswith("shake_"):
            # Variable-length digests need an explicit size
            msg = f"hash algorithm {self.algorithm!r} has no fixed digest size"
            raise ConfigError(msg)
        object.__setattr__(self, "algorithm", algorithm)

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"unknown text encoding {self.encoding!r}"
            raise ConfigError(msg) from exc
