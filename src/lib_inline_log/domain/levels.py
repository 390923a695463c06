"""Log level abstraction carrying the presentation metadata of each severity.

Purpose
-------
Offer a closed, totally ordered set of severities augmented with labels,
glyphs, ANSI colours and the numeric weight handed to console sinks.

Contents
--------
* :class:`LogLevel` enum with comparison, conversion and colour helpers.
* ``_LABEL_TABLE`` / ``_ICON_TABLE`` / ``_COLOR_TABLE`` / ``_WEIGHT_TABLE``
  constants mapping levels to their display metadata.
* :func:`coerce_level` accepting enum members, names or priorities.

System Role
-----------
Used by the pipeline to filter by priority and by the adapters to pick
styles and stdlib :mod:`logging` levels.
"""

from __future__ import annotations

import logging
from enum import Enum

ANSI_RESET = "\x1b[0m"


class LogLevel(Enum):
    """Enumerated severities ordered by ascending urgency."""

    DEBUG = 0
    VERBOSE = 1
    INFO = 2
    SUCCESS = 3
    WARNING = 4
    ERROR = 5
    CRITICAL = 6

    @property
    def priority(self) -> int:
        """Return the numeric priority used for filtering."""

        return self.value

    @property
    def label(self) -> str:
        """Return the upper-case label rendered between brackets."""

        return _LABEL_TABLE[self]

    @property
    def icon(self) -> str:
        """Return the emoji visualising the level."""

        return _ICON_TABLE[self]

    @property
    def color(self) -> str:
        """Return the ANSI escape sequence that starts the level colour."""

        return _COLOR_TABLE[self]

    @property
    def weight(self) -> int:
        """Return the severity weight handed to console sinks.

        Debug/verbose and info/success share a weight; the sink only needs
        the coarse grouping for highlighting.
        """

        return _WEIGHT_TABLE[self]

    def colorize(self, text: str) -> str:
        """Wrap ``text`` with the level colour and the reset sequence.

        Examples
        --------
        >>> LogLevel.ERROR.colorize("boom") == "\\x1b[31mboom\\x1b[0m"
        True
        """

        return f"{self.color}{text}{ANSI_RESET}"

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level's weight."""

        return weight_to_python_level(self.weight)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, priority: int) -> "LogLevel":
        """Return the :class:`LogLevel` with the given ``priority``."""
        try:
            return cls(priority)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {priority}") from exc


_LABEL_TABLE = {level: level.name for level in LogLevel}

_ICON_TABLE = {
    LogLevel.DEBUG: "🔍",
    LogLevel.VERBOSE: "📝",
    LogLevel.INFO: "ℹ️",
    LogLevel.SUCCESS: "✅",
    LogLevel.WARNING: "⚠️",
    LogLevel.ERROR: "❌",
    LogLevel.CRITICAL: "🚨",
}
# Glyphs rendered in front of the label when emoji are enabled.

_COLOR_TABLE = {
    LogLevel.DEBUG: "\x1b[90m",
    LogLevel.VERBOSE: "\x1b[36m",
    LogLevel.INFO: "\x1b[34m",
    LogLevel.SUCCESS: "\x1b[32m",
    LogLevel.WARNING: "\x1b[33m",
    LogLevel.ERROR: "\x1b[31m",
    LogLevel.CRITICAL: "\x1b[91m",
}

_WEIGHT_TABLE = {
    LogLevel.DEBUG: 500,
    LogLevel.VERBOSE: 500,
    LogLevel.INFO: 800,
    LogLevel.SUCCESS: 800,
    LogLevel.WARNING: 900,
    LogLevel.ERROR: 1000,
    LogLevel.CRITICAL: 1200,
}

CRITICAL_WEIGHT = _WEIGHT_TABLE[LogLevel.CRITICAL]


def weight_to_python_level(weight: int) -> int:
    """Translate a sink weight into the closest stdlib :mod:`logging` level.

    Examples
    --------
    >>> weight_to_python_level(900) == logging.WARNING
    True
    >>> weight_to_python_level(0) == logging.DEBUG
    True
    """

    if weight >= 1200:
        return logging.CRITICAL
    if weight >= 1000:
        return logging.ERROR
    if weight >= 900:
        return logging.WARNING
    if weight >= 800:
        return logging.INFO
    return logging.DEBUG


def coerce_level(level: "LogLevel | str | int") -> LogLevel:
    """Return ``level`` as a :class:`LogLevel`, accepting names and priorities.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(1) is LogLevel.VERBOSE
    True
    """

    if isinstance(level, LogLevel):
        return level
    if isinstance(level, bool):
        raise TypeError("log level must be a LogLevel, name, or priority")
    if isinstance(level, int):
        return LogLevel.from_numeric(level)
    if isinstance(level, str):
        return LogLevel.from_name(level)
    raise TypeError("log level must be a LogLevel, name, or priority")


__all__ = ["ANSI_RESET", "CRITICAL_WEIGHT", "LogLevel", "coerce_level", "weight_to_python_level"]
