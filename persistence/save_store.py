from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from .disk_store import DiskJsonDocumentStore
from .errors import InvalidSaveData, SaveIOError, SaveNotFound, StoreUnavailable
from .interfaces import SaveDocumentStore
from .keys import SAVE_SUFFIX, is_user_key, user_file
from .locks import KeyLockRegistry
from .models import DiskInfo, SaveFileInfo, format_mtime
from .paths import ensure_dir, probe_writable

logger = logging.getLogger(__name__)


class DiskSaveStore(SaveDocumentStore):
    """
    One save document per user key, stored as `<base_dir>/<key>.json`.

    The base directory is fixed for the lifetime of the store. Every
    filesystem error is surfaced immediately as SaveIOError; nothing is
    retried.
    """

    def __init__(self, base_dir: Path, *, serialize_writes: bool = True):
        self._base_dir = Path(base_dir)
        self._locks = KeyLockRegistry() if serialize_writes else None

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def ensure_ready(self) -> None:
        """Create the directory if needed and verify it accepts writes."""
        try:
            ensure_dir(self._base_dir)
            probe_writable(self._base_dir)
        except OSError as e:
            logger.critical("[saves] cannot use directory: %s (%s)", self._base_dir, e)
            raise StoreUnavailable(f"cannot use save directory {self._base_dir}: {e}") from e
        logger.info("[saves] using directory: %s", self._base_dir)

    def _document(self, key: str) -> DiskJsonDocumentStore:
        return DiskJsonDocumentStore(user_file(self._base_dir, key), self._locks, lock_key=key)

    def save(self, key: str, payload: Any) -> None:
        doc = self._document(key)
        try:
            doc.write({} if payload is None else payload)
        except (TypeError, ValueError) as e:
            # not representable as strict JSON (NaN, Infinity, non-JSON types)
            raise InvalidSaveData(str(e)) from e
        except OSError as e:
            raise SaveIOError(str(e)) from e

    def load(self, key: str) -> str | None:
        doc = self._document(key)
        try:
            return doc.read_text()
        except OSError as e:
            raise SaveIOError(str(e)) from e

    def raw_read(self, key: str) -> str:
        data = self.load(key)
        if data is None:
            raise SaveNotFound("Save not found")
        return data

    def raw_write(self, key: str, payload: Any) -> None:
        if not isinstance(payload, (dict, list)):
            raise InvalidSaveData("Missing or invalid data")
        self.save(key, payload)

    def delete(self, key: str) -> None:
        doc = self._document(key)
        try:
            removed = doc.delete()
        except OSError as e:
            raise SaveIOError(str(e)) from e
        if not removed:
            raise SaveNotFound("Save file not found")

    def list_keys(self) -> list[str]:
        keys: list[str] = []
        for entry in self._regular_files():
            if not entry.name.endswith(SAVE_SUFFIX):
                continue
            stem = entry.name[: -len(SAVE_SUFFIX)]
            if is_user_key(stem):
                keys.append(stem)
        return keys

    def list_files(self) -> list[SaveFileInfo]:
        files: list[SaveFileInfo] = []
        for entry in self._regular_files():
            try:
                st = entry.stat()
            except FileNotFoundError:
                # removed between listing and stat
                continue
            except OSError as e:
                raise SaveIOError(str(e)) from e
            files.append(SaveFileInfo(name=entry.name, size=st.st_size, mtime=format_mtime(st.st_mtime)))
        return files

    def disk_info(self) -> DiskInfo:
        try:
            is_dir = self._base_dir.is_dir()
            exists = is_dir or self._base_dir.exists()
        except OSError:
            exists, is_dir = False, False
        return DiskInfo(save_dir=str(self._base_dir), exists=exists, is_dir=is_dir if exists else None)

    def _regular_files(self) -> list[os.DirEntry[str]]:
        # symlinks are not followed
        try:
            with os.scandir(self._base_dir) as it:
                return [entry for entry in it if entry.is_file(follow_symlinks=False)]
        except OSError as e:
            raise SaveIOError(str(e)) from e
