from __future__ import annotations

from .errors import (
    ErrorKind,
    InvalidSaveData,
    InvalidUserKey,
    SaveIOError,
    SaveNotFound,
    SaveStoreError,
    StoreUnavailable,
)
from .keys import MAX_USER_KEY_LENGTH, sanitize_user, user_key
from .models import DiskInfo, SaveFileInfo
from .repositories import AsyncDiskSaveRepository, AsyncSaveRepository
from .save_store import DiskSaveStore

__all__ = [
    "ErrorKind",
    "SaveStoreError",
    "InvalidUserKey",
    "InvalidSaveData",
    "SaveNotFound",
    "SaveIOError",
    "StoreUnavailable",
    "MAX_USER_KEY_LENGTH",
    "sanitize_user",
    "user_key",
    "DiskInfo",
    "SaveFileInfo",
    "DiskSaveStore",
    "AsyncSaveRepository",
    "AsyncDiskSaveRepository",
]
