"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`Logger`: the shared
:class:`LoggerConfig`, the console sink (wrapped so failures are contained)
and the system clock.
"""

from __future__ import annotations

import logging
from typing import Callable

from lib_inline_log.adapters import LoggingConsoleAdapter, RichConsoleAdapter, SafeConsoleAdapter, SystemClock
from lib_inline_log.application.ports import ClockPort, ConsolePort
from lib_inline_log.domain import LoggerConfig
from lib_inline_log.logger import Logger

from ._settings import RuntimeSettings

LOGGER = logging.getLogger(__name__)

ConsoleFactory = Callable[[RuntimeSettings], ConsolePort]


def build_runtime(
    settings: RuntimeSettings,
    *,
    console_factory: ConsoleFactory | None = None,
    clock: ClockPort | None = None,
) -> Logger:
    """Assemble the runtime logger from resolved settings."""

    config = create_config(settings)
    console = SafeConsoleAdapter(_select_console_adapter(settings, console_factory))
    LOGGER.debug(
        "inline logger composed: enabled=%s min_level=%s sink=%s",
        settings.enabled,
        settings.min_level.name,
        settings.sink,
    )
    return Logger(config, console, clock=clock or SystemClock())


def create_config(settings: RuntimeSettings) -> LoggerConfig:
    return LoggerConfig.for_profile(
        development=settings.development,
        enabled=settings.enabled,
        min_level=settings.min_level,
        show_timestamp=settings.show_timestamp,
        show_emoji=settings.show_emoji,
        use_colors=settings.use_colors,
        max_history_size=settings.max_history_size,
    )


def create_console(settings: RuntimeSettings) -> ConsolePort:
    """Return the default sink selected by ``settings.sink``."""

    if settings.sink == "logging":
        return LoggingConsoleAdapter()
    return RichConsoleAdapter(force_color=settings.force_color, no_color=settings.no_color)


def _select_console_adapter(settings: RuntimeSettings, console_factory: ConsoleFactory | None) -> ConsolePort:
    if console_factory is not None:
        return console_factory(settings)
    return create_console(settings)


__all__ = ["ConsoleFactory", "build_runtime", "create_config", "create_console"]
