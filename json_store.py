from __future__ import annotations

import contextlib
import json
import os
import uuid
from pathlib import Path
from typing import Any


def read_json_text(path: Path) -> str | None:
    """
    Read a JSON document from disk as text.

    Returns None when the file does not exist. Any other OSError propagates.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def temp_path_for(path: Path) -> Path:
    """Unique sibling temp path, so concurrent writers never share a temp file."""
    return path.with_name(f"{path.name}.{uuid.uuid4().hex}.tmp")


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = False) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    The rename is the commit point: readers see either the old or the new
    document in full. On failure the temp file is removed and the error is
    re-raised. Non-finite floats raise ValueError before anything is written;
    non-ASCII text is escaped so any decoded string can be stored.
    """
    data = json.dumps(payload, indent=indent, sort_keys=sort_keys, allow_nan=False)
    tmp_path = temp_path_for(path)
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(data)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
