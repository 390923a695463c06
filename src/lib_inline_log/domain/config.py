"""Shared logger configuration and its history buffer.

Purpose
-------
Hold the toggles every log call reads (filtering, formatting, colour) and
own the bounded :class:`LogHistory`.

Contents
--------
* :class:`LoggerConfig` - mutable settings record shared by reference.
* :class:`ConfigSnapshot` - immutable view used for diagnostics.

System Role
-----------
One instance is created by the runtime composition root and handed to the
pipeline and the :class:`lib_inline_log.logger.Logger` façade. Tests create
independent instances instead of mutating a singleton.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .history import LogHistory
from .levels import LogLevel, coerce_level

DEFAULT_MAX_HISTORY_SIZE = 100


@dataclass(frozen=True)
class ConfigSnapshot:
    """Immutable view over a :class:`LoggerConfig`."""

    enabled: bool
    min_level: LogLevel
    show_timestamp: bool
    show_emoji: bool
    use_colors: bool
    max_history_size: int
    history_length: int


class LoggerConfig:
    """Settings record consulted by every log call.

    Attributes are assigned directly; ``min_level`` accepts names and
    priorities, ``max_history_size`` clamps negative values to zero and trims
    the history immediately.

    Examples
    --------
    >>> config = LoggerConfig(max_history_size=1)
    >>> config.append_to_history("first")
    >>> config.append_to_history("second")
    >>> config.read_history()
    ('second',)
    >>> config.min_level = "warning"
    >>> config.is_enabled_for(LogLevel.INFO)
    False
    """

    def __init__(
        self,
        *,
        min_level: LogLevel | str | int = LogLevel.DEBUG,
        show_timestamp: bool = True,
        show_emoji: bool = True,
        use_colors: bool = True,
        enabled: bool = True,
        max_history_size: int = DEFAULT_MAX_HISTORY_SIZE,
    ) -> None:
        self._history = LogHistory(max_entries=max_history_size)
        self._min_level = coerce_level(min_level)
        self.show_timestamp = show_timestamp
        self.show_emoji = show_emoji
        self.use_colors = use_colors
        self.enabled = enabled

    @classmethod
    def for_profile(cls, *, development: bool, **overrides: Any) -> "LoggerConfig":
        """Return a config whose ``enabled`` default follows the build profile.

        Logging is on in development builds and off otherwise unless
        ``enabled`` is passed explicitly.
        """

        overrides.setdefault("enabled", development)
        return cls(**overrides)

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @min_level.setter
    def min_level(self, value: LogLevel | str | int) -> None:
        self._min_level = coerce_level(value)

    @property
    def max_history_size(self) -> int:
        return self._history.max_entries

    @max_history_size.setter
    def max_history_size(self, value: int) -> None:
        self._history.max_entries = value

    @property
    def history(self) -> tuple[str, ...]:
        """Return a read-only snapshot of the retained lines."""

        return self._history.snapshot()

    def read_history(self) -> tuple[str, ...]:
        """Return a read-only snapshot of the retained lines, oldest first."""

        return self._history.snapshot()

    def append_to_history(self, entry: str) -> None:
        """Record ``entry``, evicting the oldest lines beyond the bound."""

        self._history.append(entry)

    def clear_history(self) -> None:
        self._history.clear()

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return ``True`` when a call at ``level`` passes both gates."""

        return self.enabled and level >= self._min_level

    def snapshot(self) -> ConfigSnapshot:
        return ConfigSnapshot(
            enabled=self.enabled,
            min_level=self._min_level,
            show_timestamp=self.show_timestamp,
            show_emoji=self.show_emoji,
            use_colors=self.use_colors,
            max_history_size=self._history.max_entries,
            history_length=len(self._history),
        )


__all__ = ["ConfigSnapshot", "DEFAULT_MAX_HISTORY_SIZE", "LoggerConfig"]
