from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from .errors import InvalidUserKey

MAX_USER_KEY_LENGTH = 64
SAVE_SUFFIX = ".json"

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")
_USER_KEY_RE = re.compile(r"[A-Za-z0-9_-]{1,%d}" % MAX_USER_KEY_LENGTH)


def sanitize_user(raw: Any) -> str:
    """
    Keep ASCII letters, digits, underscore and hyphen; cap the length.

    Total and idempotent. Distinct identifiers may map to the same key
    ("a.b" and "ab"), which is accepted.
    """
    return _UNSAFE_CHARS_RE.sub("", str(raw))[:MAX_USER_KEY_LENGTH]


def user_key(raw: Any) -> str:
    """Sanitize a raw identifier, rejecting ones with no usable characters."""
    key = sanitize_user(raw)
    if not key:
        raise InvalidUserKey("Invalid user")
    return key


def is_user_key(key: str) -> bool:
    return isinstance(key, str) and bool(_USER_KEY_RE.fullmatch(key))


def user_file(base_dir: Path, key: str) -> Path:
    if not is_user_key(key):
        raise InvalidUserKey(f"Invalid user key: {key!r}")
    return base_dir / f"{key}{SAVE_SUFFIX}"
