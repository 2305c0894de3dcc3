"""In-memory implementation of StoreProtocol (tests, WALL_STORAGE=memory)."""

import json
import threading
from typing import Any, Optional

from errors import StorageUnavailable

from .base import check_key


class MemoryStore:
    """Keeps each record as JSON text so values round-trip exactly as on disk.

    Set ``fail_writes`` to simulate a full or unavailable medium.
    """

    def __init__(self, fail_writes: bool = False):
        self.fail_writes = fail_writes
        self._records: dict[str, str] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[Any]:
        raw = self._records.get(check_key(key))
        return json.loads(raw) if raw is not None else None

    def write(self, key: str, value: Any) -> None:
        check_key(key)
        if self.fail_writes:
            raise StorageUnavailable(f"Cannot write {key}: store is read-only")
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"Cannot serialize {key}: {e}") from e
        with self._lock:
            self._records[key] = payload

    def clear(self, key: str) -> None:
        check_key(key)
        if self.fail_writes:
            raise StorageUnavailable(f"Cannot remove {key}: store is read-only")
        with self._lock:
            self._records.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._records)
