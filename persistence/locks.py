from __future__ import annotations

import contextlib
import threading
import weakref
from typing import Iterator


class KeyLock:
    __slots__ = ("_lock", "__weakref__")

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __enter__(self) -> "KeyLock":
        self._lock.acquire()
        return self

    def __exit__(self, *exc: object) -> None:
        self._lock.release()


class KeyLockRegistry:
    """
    One lock per save key, held only while some caller references it.

    Entries disappear once no writer holds them, so arbitrary keys never
    accumulate.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary[str, KeyLock] = weakref.WeakValueDictionary()

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def lock_for(self, key: str) -> KeyLock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = KeyLock()
                self._locks[key] = lock
            return lock


@contextlib.contextmanager
def maybe_locked(registry: KeyLockRegistry | None, key: str) -> Iterator[None]:
    if registry is None:
        yield
        return
    with registry.lock_for(key):
        yield
