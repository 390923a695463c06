"""Chainable inline console logging with emoji levels, colour and history.

Public surface re-exported from the inner layers so host code only needs
``import lib_inline_log``::

    import lib_inline_log as log

    logger = log.init(development=True)
    user = log.logged(load_user(), "user")
    logger.api_response(endpoint="/users", status_code=404)
    crash_report = logger.config.read_history()
"""

from __future__ import annotations

from .adapters import LoggingConsoleAdapter, RichConsoleAdapter, SafeConsoleAdapter
from .application.ports import ClockPort, ConsolePort
from .domain import ConfigSnapshot, LoggerConfig, LogLevel
from .inline import (
    logged,
    logged_critical,
    logged_debug,
    logged_error,
    logged_info,
    logged_success,
    logged_verbose,
    logged_warning,
)
from .logger import Logger
from .runtime import RuntimeSnapshot, get, init, inspect_runtime, is_initialised, shutdown, summary_info

__all__ = [
    "ClockPort",
    "ConfigSnapshot",
    "ConsolePort",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "LoggingConsoleAdapter",
    "RichConsoleAdapter",
    "RuntimeSnapshot",
    "SafeConsoleAdapter",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logged",
    "logged_critical",
    "logged_debug",
    "logged_error",
    "logged_info",
    "logged_success",
    "logged_verbose",
    "logged_warning",
    "shutdown",
    "summary_info",
]
