"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class StorageConfig:
    """Location of the backing store and the timezone override file."""

    home: str = ""
    records_filename: str = "timestamps.csv"
    timezone_filename: str = "tz"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class TsConfig:
    """Top-level tslog configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    editor: str = ""
    log: LogConfig = field(default_factory=LogConfig)
