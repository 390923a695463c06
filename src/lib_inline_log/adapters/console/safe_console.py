"""Failure-containing wrapper around any :class:`ConsolePort`.

A broken sink must not crash the caller's business logic: exceptions raised
by the wrapped adapter are logged through this module's logger and counted
as drops.
"""

from __future__ import annotations

import logging
import threading

from lib_inline_log.application.ports.console import ConsolePort

LOGGER = logging.getLogger(__name__)


class SafeConsoleAdapter(ConsolePort):
    """Delegate to ``inner`` and drop lines it fails to write.

    Examples
    --------
    >>> class Broken:
    ...     def emit(self, message, *, weight, stack_trace=None):
    ...         raise OSError("closed")
    >>> adapter = SafeConsoleAdapter(Broken())
    >>> adapter.emit("hello", weight=800)
    >>> adapter.dropped
    1
    """

    def __init__(self, inner: ConsolePort) -> None:
        self._inner = inner
        self._dropped = 0
        self._lock = threading.Lock()

    @property
    def inner(self) -> ConsolePort:
        return self._inner

    @property
    def dropped(self) -> int:
        """Return how many lines the wrapped sink failed to write."""

        with self._lock:
            return self._dropped

    def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
        try:
            self._inner.emit(message, weight=weight, stack_trace=stack_trace)
        except Exception:
            with self._lock:
                self._dropped += 1
            LOGGER.warning("console sink %s failed; dropping log line", type(self._inner).__name__, exc_info=True)


__all__ = ["SafeConsoleAdapter"]
