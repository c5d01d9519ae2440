"""Settings from the environment (.env at the repo root or cwd is loaded first)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from conquistas.application.validation import DEFAULT_MAX_PHOTO_BYTES
from conquistas.infrastructure.phone import DEFAULT_REGION


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    phone_region: str | None = DEFAULT_REGION
    max_photo_bytes: int = DEFAULT_MAX_PHOTO_BYTES
    log_level: str = "INFO"


def load_env() -> None:
    """Load the first .env found (repo root, then cwd). Existing env vars win."""
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            break


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _log_level_env(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper() or default
    if level not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return level


def load_settings() -> Settings:
    load_env()
    region = os.environ.get("CONQUISTAS_PHONE_REGION", DEFAULT_REGION).strip().upper()
    return Settings(
        data_dir=Path(os.environ.get("CONQUISTAS_DATA_DIR", "data").strip() or "data"),
        phone_region=region or None,
        max_photo_bytes=_int_env("CONQUISTAS_MAX_PHOTO_BYTES", DEFAULT_MAX_PHOTO_BYTES),
        log_level=_log_level_env("CONQUISTAS_LOG_LEVEL", "INFO"),
    )
