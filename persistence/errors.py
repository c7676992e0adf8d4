"""Exception hierarchy for the save store."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    STARTUP_FAILURE = "startup_failure"


class SaveStoreError(Exception):
    """Base exception for all save store errors."""

    kind: ErrorKind = ErrorKind.IO_FAILURE


class InvalidUserKey(SaveStoreError):
    """Raised when a user identifier does not yield a usable key."""

    kind = ErrorKind.VALIDATION


class InvalidSaveData(SaveStoreError):
    """Raised when a raw write payload is not an object-shaped JSON value."""

    kind = ErrorKind.VALIDATION


class SaveNotFound(SaveStoreError):
    """Raised when no save document exists for a key."""

    kind = ErrorKind.NOT_FOUND


class SaveIOError(SaveStoreError):
    """Raised when the underlying filesystem call fails. Never retried."""

    kind = ErrorKind.IO_FAILURE


class StoreUnavailable(SaveStoreError):
    """Raised at startup when the save directory cannot be created or written."""

    kind = ErrorKind.STARTUP_FAILURE
