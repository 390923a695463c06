"""Logger façade exposing the severity wrappers and structured helpers.

Purpose
-------
Give host code one object to call: ``logger.info(value, "name")``,
``logger.api_response(...)``, ``logger.logged(value)`` inside expressions.

Contents
--------
* :class:`Logger` - wraps the emit pipeline and divider writer built from a
  :class:`LoggerConfig`, a console sink and a clock.

System Role
-----------
Created by :func:`lib_inline_log.runtime.init` (or directly in tests) and
shared by reference; holds no state beyond its collaborators.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Mapping, TypeVar

from .adapters.clock import SystemClock
from .application.ports import ClockPort, ConsolePort
from .application.use_cases.emit_log import create_emit_log, create_write_divider
from .domain import LoggerConfig, LogLevel

T = TypeVar("T")


class Logger:
    """Severity-aware console logger bound to one configuration.

    Examples
    --------
    >>> class PrintConsole:
    ...     def emit(self, message, *, weight, stack_trace=None):
    ...         print(message)
    >>> config = LoggerConfig(show_timestamp=False, show_emoji=False, use_colors=False)
    >>> logger = Logger(config, PrintConsole())
    >>> logger.info("ready", "boot")
     [INFO] @boot ready
    >>> logger.logged(21 * 2, "answer")
     [DEBUG] @answer 42
    42
    """

    def __init__(self, config: LoggerConfig, console: ConsolePort, *, clock: ClockPort | None = None) -> None:
        self._config = config
        self._console = console
        self._emit = create_emit_log(config=config, console=console, clock=clock or SystemClock())
        self._write_divider = create_write_divider(config=config, console=console)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def console(self) -> ConsolePort:
        return self._console

    def log(
        self,
        value: Any,
        name: str = "",
        *,
        level: LogLevel = LogLevel.DEBUG,
        stack_trace: str | None = None,
        save_to_history: bool = False,
    ) -> None:
        """Send ``value`` through the pipeline at ``level``."""

        self._emit(value, name, level, stack_trace=stack_trace, force_history=save_to_history)

    def debug(self, value: Any, name: str = "") -> None:
        self.log(value, name, level=LogLevel.DEBUG)

    def verbose(self, value: Any, name: str = "") -> None:
        self.log(value, name, level=LogLevel.VERBOSE)

    def info(self, value: Any, name: str = "") -> None:
        self.log(value, name, level=LogLevel.INFO)

    def success(self, value: Any, name: str = "") -> None:
        self.log(value, name, level=LogLevel.SUCCESS)

    def warning(self, value: Any, name: str = "") -> None:
        self.log(value, name, level=LogLevel.WARNING, save_to_history=True)

    def error(self, value: Any, name: str = "", stack_trace: str | None = None) -> None:
        self.log(value, name, level=LogLevel.ERROR, stack_trace=stack_trace, save_to_history=True)

    def critical(self, value: Any, name: str = "", stack_trace: str | None = None) -> None:
        self.log(value, name, level=LogLevel.CRITICAL, stack_trace=stack_trace, save_to_history=True)

    def logged(self, value: T, name: str = "", level: LogLevel = LogLevel.DEBUG) -> T:
        """Log ``value`` and hand it back unchanged, for use inside expressions."""

        self.log(value, name, level=level)
        return value

    def divider(self, title: str = "") -> None:
        """Write a separator line; bypasses the severity gate and history."""

        self._write_divider(title)

    def header(self, title: str) -> None:
        self._write_divider(title)

    def json(self, data: Mapping[str, Any], name: str = "JSON") -> None:
        """Log a mapping at info level without pretty-printing it."""
        if not self._config.enabled:
            return
        self.info(data, name)

    def api_request(
        self,
        *,
        endpoint: str,
        method: str,
        headers: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> None:
        """Log an outgoing request framed by dividers."""

        if not self._config.enabled:
            return
        self.divider("API REQUEST")
        self.info(f"{method} {endpoint}", "Endpoint")
        if headers is not None:
            self.verbose(headers, "Headers")
        if body is not None:
            self.verbose(body, "Body")
        self.divider()

    def api_response(
        self,
        *,
        endpoint: str,
        status_code: int,
        data: Any = None,
        duration: timedelta | None = None,
    ) -> None:
        """Log a response; the status line severity follows the status code range."""

        if not self._config.enabled:
            return
        self.divider("API RESPONSE")
        self.info(endpoint, "Endpoint")
        self.log(status_code, "Status", level=status_level(status_code))
        if duration is not None:
            self.verbose(f"{int(duration / timedelta(milliseconds=1))}ms", "Duration")
        if data is not None:
            self.verbose(data, "Data")
        self.divider()

    def navigation(self, from_route: str, to_route: str) -> None:
        self.info(f"{from_route} → {to_route}", "Navigation")

    def lifecycle(self, event: str, details: str | None = None) -> None:
        self.verbose(details if details is not None else event, "Lifecycle")

    def state(self, state_name: str, value: Any) -> None:
        self.debug(value, f"State: {state_name}")


def status_level(status_code: int) -> LogLevel:
    """Return the severity used for an HTTP status line.

    Examples
    --------
    >>> [status_level(code).name for code in (204, 404, 100, 302)]
    ['SUCCESS', 'ERROR', 'INFO', 'INFO']
    """

    if 200 <= status_code < 300:
        return LogLevel.SUCCESS
    if status_code >= 400:
        return LogLevel.ERROR
    return LogLevel.INFO


__all__ = ["Logger", "status_level"]
