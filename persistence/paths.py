from __future__ import annotations

import contextlib
import time
from pathlib import Path

PROBE_FILENAME = ".write_probe"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def probe_writable(path: Path) -> None:
    """
    Touch a file in `path` to verify writes, then clean it up.

    Raises OSError if the directory cannot be written.
    """
    probe = path / PROBE_FILENAME
    probe.write_text(str(int(time.time() * 1000)), encoding="utf-8")
    with contextlib.suppress(OSError):
        probe.unlink()
