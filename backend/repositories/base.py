"""Abstract key/value persistence interface."""

import re
from typing import Any, Optional, Protocol, runtime_checkable

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def check_key(key: str) -> str:
    """Reject keys that cannot be used as a record name on disk."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key):
        raise ValueError(f"Invalid store key: {key!r}")
    return key


@runtime_checkable
class StoreProtocol(Protocol):
    """Durable store of named JSON-compatible records.

    Implementations raise ``errors.StorageUnavailable`` when the medium
    cannot be read or written.
    """

    def read(self, key: str) -> Optional[Any]:
        ...

    def write(self, key: str, value: Any) -> None:
        ...

    def clear(self, key: str) -> None:
        ...
