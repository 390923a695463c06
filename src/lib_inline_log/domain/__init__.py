"""Domain entities and value objects used by the inline logger."""

from __future__ import annotations

from .config import ConfigSnapshot, LoggerConfig
from .history import LogHistory
from .levels import LogLevel, coerce_level
from .record import LogRecord

__all__ = [
    "ConfigSnapshot",
    "LogHistory",
    "LogLevel",
    "LogRecord",
    "LoggerConfig",
    "coerce_level",
]
