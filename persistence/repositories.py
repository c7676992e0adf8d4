from __future__ import annotations

import asyncio
from typing import Any, Protocol

from .interfaces import SaveDocumentStore
from .models import DiskInfo, SaveFileInfo


class AsyncSaveRepository(Protocol):
    async def save(self, key: str, payload: Any) -> None: ...
    async def load(self, key: str) -> str | None: ...

    async def raw_read(self, key: str) -> str: ...
    async def raw_write(self, key: str, payload: Any) -> None: ...
    async def delete(self, key: str) -> None: ...

    async def list_keys(self) -> list[str]: ...
    async def list_files(self) -> list[SaveFileInfo]: ...
    async def disk_info(self) -> DiskInfo: ...


class AsyncDiskSaveRepository(AsyncSaveRepository):
    """
    Async wrapper around the disk-backed save store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: SaveDocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> SaveDocumentStore:
        return self._store

    async def save(self, key: str, payload: Any) -> None:
        await asyncio.to_thread(self._store.save, key, payload)

    async def load(self, key: str) -> str | None:
        return await asyncio.to_thread(self._store.load, key)

    async def raw_read(self, key: str) -> str:
        return await asyncio.to_thread(self._store.raw_read, key)

    async def raw_write(self, key: str, payload: Any) -> None:
        await asyncio.to_thread(self._store.raw_write, key, payload)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._store.delete, key)

    async def list_keys(self) -> list[str]:
        return await asyncio.to_thread(self._store.list_keys)

    async def list_files(self) -> list[SaveFileInfo]:
        return await asyncio.to_thread(self._store.list_files)

    async def disk_info(self) -> DiskInfo:
        return await asyncio.to_thread(self._store.disk_info)
