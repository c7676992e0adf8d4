from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PORT = 10000
DEFAULT_MAX_BODY_BYTES = 5 * 1024 * 1024


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def default_save_dir() -> Path:
    # settings.py lives at the project root
    return Path(__file__).resolve().parent / "saves"


@dataclass(frozen=True)
class Settings:
    # Storage
    save_dir: Path
    serialize_writes: bool

    # Server
    host: str
    port: int
    max_body_bytes: int
    cors_allow_origins: list[str]

    # Debug
    debug_log_requests: bool
    log_level: str


def get_settings() -> Settings:
    # On Render, point FLEX_SAVE_DIR at the persistent disk mount (e.g. /var/flex-saves).
    raw_dir = os.getenv("FLEX_SAVE_DIR", "").strip()
    save_dir = Path(raw_dir) if raw_dir else default_save_dir()

    return Settings(
        save_dir=save_dir,
        serialize_writes=_env_bool("FLEX_SERIALIZE_WRITES", True),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_int("PORT", DEFAULT_PORT),
        max_body_bytes=_env_int("FLEX_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS", ["*"]),
        debug_log_requests=_env_bool("DEBUG_LOG_REQUESTS", False),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
