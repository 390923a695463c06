"""Inline logging sugar: log a value and keep using it.

``user = logged(fetch_user(), "user")`` writes the value through the active
runtime logger and returns it unchanged, so logging fits inside expressions
without temporary variables.
"""

from __future__ import annotations

from functools import partial
from typing import TypeVar

from .domain import LogLevel
from .logger import Logger
from .runtime import get

T = TypeVar("T")


def logged(value: T, name: str = "", level: LogLevel = LogLevel.DEBUG, *, logger: Logger | None = None) -> T:
    """Log ``value`` at ``level`` and return it.

    Uses ``logger`` when given, otherwise the runtime logger installed by
    :func:`lib_inline_log.init`; raises :class:`RuntimeError` when neither is
    available.
    """

    target = logger if logger is not None else get()
    return target.logged(value, name, level)


logged_debug = partial(logged, level=LogLevel.DEBUG)
logged_verbose = partial(logged, level=LogLevel.VERBOSE)
logged_info = partial(logged, level=LogLevel.INFO)
logged_success = partial(logged, level=LogLevel.SUCCESS)
logged_warning = partial(logged, level=LogLevel.WARNING)
logged_error = partial(logged, level=LogLevel.ERROR)
logged_critical = partial(logged, level=LogLevel.CRITICAL)


__all__ = [
    "logged",
    "logged_critical",
    "logged_debug",
    "logged_error",
    "logged_info",
    "logged_success",
    "logged_verbose",
    "logged_warning",
]
