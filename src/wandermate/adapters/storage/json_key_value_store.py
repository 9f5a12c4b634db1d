"""Flat key-value store persisted as a single JSON file.

Every write goes straight to disk through a temporary file and an atomic
rename.
"""

import json
import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Any

from wandermate.domain.errors import StorageError

logger = logging.getLogger(__name__)


class JsonKeyValueStore:
    """Key-value store with explicit load/close lifecycle and write-through persistence."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the JSON file path (created on first write)."""
        self._path = Path(path).expanduser()
        self._data: dict[str, Any] = {}
        self._loaded = False

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def load(self) -> None:
        """Read the backing file. A missing file means an empty store.

        Raises:
            StorageError: If the file exists but is unreadable or not a JSON object.
        """
        if not self._path.exists():
            self._data = {}
            self._loaded = True
            return

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read storage file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._path} does not contain a JSON object")
        self._data = data
        self._loaded = True
        logger.debug(f"Loaded {len(data)} key(s) from {self._path}")

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``."""
        self._ensure_loaded()
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value and persist."""
        self._ensure_loaded()
        self._data[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        """Remove a key (no-op if absent) and persist."""
        self._ensure_loaded()
        if key in self._data:
            del self._data[key]
            self._flush()

    def clear(self) -> None:
        """Remove every key and persist."""
        self._data = {}
        self._loaded = True
        self._flush()

    def close(self) -> None:
        """Flush pending state. The store can be reloaded afterwards."""
        if self._loaded:
            self._flush()
        self._loaded = False
        self._data = {}

    def _flush(self) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Cannot write storage file {self._path}: {e}") from e

    def __enter__(self) -> "JsonKeyValueStore":
        """Load on entry."""
        self.load()
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Close on exit."""
        self.close()
