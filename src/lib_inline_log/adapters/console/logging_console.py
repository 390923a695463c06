"""Stdlib :mod:`logging` adapter implementing :class:`ConsolePort`.

Forwards rendered lines to a named :class:`logging.Logger` so hosts that
already route output through handlers (IDE consoles, log collectors) receive
inline-logger lines with a matching stdlib level.
"""

from __future__ import annotations

import logging

from lib_inline_log.application.ports.console import ConsolePort
from lib_inline_log.domain.levels import weight_to_python_level

DEFAULT_LOGGER_NAME = "InlineLogger"


class LoggingConsoleAdapter(ConsolePort):
    """Write log lines to a stdlib logger, mapping weight onto its levels."""

    def __init__(self, *, logger: logging.Logger | None = None, name: str = DEFAULT_LOGGER_NAME) -> None:
        self._logger = logger if logger is not None else logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
        """Log ``message`` at the level derived from ``weight``."""
        if stack_trace:
            message = f"{message}\n{stack_trace.rstrip()}"
        self._logger.log(weight_to_python_level(weight), "%s", message)


__all__ = ["DEFAULT_LOGGER_NAME", "LoggingConsoleAdapter"]
