"""Runtime state container and access helpers."""

from __future__ import annotations

from threading import RLock

from lib_inline_log.logger import Logger

from ._settings import RuntimeSettings

_STATE: tuple[Logger, RuntimeSettings] | None = None
_STATE_LOCK = RLock()


def set_runtime(logger: Logger, settings: RuntimeSettings) -> None:
    """Install ``logger`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = (logger, settings)


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> tuple[Logger, RuntimeSettings]:
    """Return the active logger and its settings or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_inline_log.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_inline_log.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
