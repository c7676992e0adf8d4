from __future__ import annotations

from typing import Any, Protocol

from .models import DiskInfo, SaveFileInfo


class SaveDocumentStore(Protocol):
    """
    Minimal DB-friendly interface: one opaque JSON document per user key.
    """

    def save(self, key: str, payload: Any) -> None:
        """Persist the full document atomically (None becomes {})."""
        ...

    def load(self, key: str) -> str | None:
        """Return the raw JSON text, or None if nothing was saved."""
        ...

    def raw_read(self, key: str) -> str:
        """Return the raw JSON text; raise SaveNotFound if absent."""
        ...

    def raw_write(self, key: str, payload: Any) -> None:
        """Persist an object-shaped document; raise InvalidSaveData otherwise."""
        ...

    def delete(self, key: str) -> None:
        """Remove the document; raise SaveNotFound if absent."""
        ...

    def list_keys(self) -> list[str]:
        ...

    def list_files(self) -> list[SaveFileInfo]:
        ...

    def disk_info(self) -> DiskInfo:
        ...
