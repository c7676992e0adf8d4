from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def format_mtime(ts: float) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SaveFileInfo(BaseModel):
    name: str
    size: int
    mtime: str


class DiskInfo(BaseModel):
    """
    Mirrors the disk-info response:
      { "saveDir": "/var/flex-saves", "exists": true, "isDir": true }
    `isDir` is left out when the directory does not exist.
    """

    model_config = ConfigDict(populate_by_name=True)

    save_dir: str = Field(alias="saveDir")
    exists: bool
    is_dir: bool | None = Field(default=None, alias="isDir")

    def to_response_doc(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
