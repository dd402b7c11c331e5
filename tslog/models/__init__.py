"""Core data structures for tslog."""

from tslog.models.config import LogConfig, StorageConfig, TsConfig
from tslog.models.records import DEFAULT_NAME, DisplayConfig, Record

__all__ = [
    "DEFAULT_NAME",
    "DisplayConfig",
    "LogConfig",
    "Record",
    "StorageConfig",
    "TsConfig",
]
