"""Configuration loading from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from tslog.errors import StoreIOError
from tslog.models.config import LogConfig, StorageConfig, TsConfig

_DEFAULT_STORAGE_FOLDER = Path(".config") / "ts"


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"TSLOG_{key}", default)


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _default_home() -> str:
    try:
        return str(Path.home() / _DEFAULT_STORAGE_FOLDER)
    except RuntimeError as exc:
        raise StoreIOError("~", exc) from exc


def load_config() -> TsConfig:
    """Load configuration from TSLOG_* environment variables."""
    return TsConfig(
        storage=StorageConfig(
            home=_env("HOME") or _default_home(),
        ),
        editor=os.environ.get("EDITOR", ""),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "warning")),
        ),
    )
