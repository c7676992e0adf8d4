from __future__ import annotations

from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json_text

from .locks import KeyLockRegistry, maybe_locked


class DiskJsonDocumentStore:
    """
    Stores a single JSON document on disk at a fixed path.

    - Reads return the raw text, or None when the file is missing.
    - Writes atomically (temp file + rename).
    - Writes and deletes sharing a lock key (the file name by default) are
      serialized when a lock registry is given; reads never lock.
    """

    def __init__(self, path: Path, locks: KeyLockRegistry | None = None, lock_key: str | None = None):
        self._path = path
        self._locks = locks
        self._lock_key = lock_key or path.name

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str | None:
        return read_json_text(self._path)

    def write(self, doc: Any) -> None:
        with maybe_locked(self._locks, self._lock_key):
            atomic_write_json(self._path, doc)

    def delete(self) -> bool:
        """Remove the file. Returns False if it did not exist."""
        with maybe_locked(self._locks, self._lock_key):
            try:
                self._path.unlink()
            except FileNotFoundError:
                return False
            return True
