"""
File-based implementation of StoreProtocol.
One JSON file per key under a configurable data directory.
"""

import contextlib
import json
import logging
import threading
import time
from pathlib import Path
from typing import Any, Optional

from errors import StorageUnavailable
from .base import check_key

logger = logging.getLogger(__name__)


class FileStore:
    """File-based persistence: users, posts and the current session, each as <key>.json."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Cannot create data dir {self.data_dir}: {e}") from e
        self._lock = threading.Lock()

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{check_key(key)}.json"

    def read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            moved = self._quarantine(path)
            logger.warning("Unreadable record %s moved to %s: %s", path.name, moved.name, e)
            return None
        except OSError as e:
            raise StorageUnavailable(f"Cannot read {path.name}: {e}") from e

    def _quarantine(self, path: Path) -> Path:
        """Move an unparseable file aside so the next write cannot overwrite it."""
        target = path.with_name(f"{path.stem}.corrupt-{time.time_ns()}.json")
        with self._lock:
            try:
                path.replace(target)
            except OSError as e:
                raise StorageUnavailable(f"Cannot move aside unreadable {path.name}: {e}") from e
        return target

    def write(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            payload = json.dumps(value, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"Cannot serialize {key}: {e}") from e
        with self._lock:
            tmp = path.with_suffix(".tmp")
            try:
                with open(tmp, "w", encoding="utf-8") as f:
                    f.write(payload)
                tmp.replace(path)
            except OSError as e:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)
                raise StorageUnavailable(f"Cannot write {path.name}: {e}") from e

    def clear(self, key: str) -> None:
        path = self._path(key)
        with self._lock:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise StorageUnavailable(f"Cannot remove {path.name}: {e}") from e
