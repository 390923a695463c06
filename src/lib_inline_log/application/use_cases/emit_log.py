"""Use case orchestrating the pipeline for a single log call.

Purpose
-------
Tie together level filtering, rendering, history retention, colouring and
console emission.

Contents
--------
* :func:`create_emit_log` factory returning the per-call pipeline.
* :func:`create_write_divider` factory returning the divider writer.
* ``HISTORY_LEVELS`` - severities always retained in history.

System Role
-----------
Application-layer orchestrator wired by :class:`lib_inline_log.logger.Logger`.
Every severity wrapper and structured helper passes through here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from lib_inline_log.application.ports import ClockPort, ConsolePort
from lib_inline_log.domain import LoggerConfig, LogLevel, LogRecord

HISTORY_LEVELS = frozenset({LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL})
"""Severities whose plain rendering always lands in history."""

DIVIDER_WIDTH = 60
DIVIDER_WEIGHT = LogLevel.INFO.weight


class EmitCallable(Protocol):
    """Signature of the callable returned by :func:`create_emit_log`."""

    def __call__(
        self,
        value: Any,
        name: str = "",
        level: LogLevel = LogLevel.DEBUG,
        *,
        stack_trace: str | None = None,
        force_history: bool = False,
    ) -> None: ...


def create_emit_log(
    *,
    config: LoggerConfig,
    console: ConsolePort,
    clock: ClockPort,
) -> EmitCallable:
    """Build the pipeline capturing the current collaborators.

    Parameters
    ----------
    config:
        Shared :class:`LoggerConfig`; read on every call so runtime changes
        apply immediately.
    console:
        Sink implementing :class:`ConsolePort`.
    clock:
        Provider of timezone-aware timestamps.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class DummyConsole:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, message, *, weight, stack_trace=None):
    ...         self.lines.append((message, weight))
    >>> class DummyClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> config = LoggerConfig(show_emoji=False, use_colors=False)
    >>> console = DummyConsole()
    >>> emit = create_emit_log(config=config, console=console, clock=DummyClock())
    >>> emit("disk full", "storage", LogLevel.WARNING)
    >>> console.lines
    [('[2025-09-30T12:00:00.000+00:00] [WARNING] @storage disk full', 900)]
    >>> config.read_history()
    ('[2025-09-30T12:00:00.000+00:00] [WARNING] @storage disk full',)
    """

    toolkit = _PipelineToolkit(config=config, console=console, clock=clock)
    return _EmitPipeline(toolkit)


def create_write_divider(*, config: LoggerConfig, console: ConsolePort) -> Callable[[str], None]:
    """Return a writer for separator lines.

    Dividers skip the severity gate and history; they only honour
    ``config.enabled``.
    """

    def write_divider(title: str = "") -> None:
        if not config.enabled:
            return
        console.emit(_divider_line(title), weight=DIVIDER_WEIGHT)

    return write_divider


@dataclass(frozen=True)
class _PipelineToolkit:
    config: LoggerConfig
    console: ConsolePort
    clock: ClockPort


class _EmitPipeline:
    def __init__(self, toolkit: _PipelineToolkit) -> None:
        self._toolkit = toolkit

    def __call__(
        self,
        value: Any,
        name: str = "",
        level: LogLevel = LogLevel.DEBUG,
        *,
        stack_trace: str | None = None,
        force_history: bool = False,
    ) -> None:
        config = self._toolkit.config
        if not config.enabled:
            return
        if level < config.min_level:
            return
        plain = _craft_record(self._toolkit, value, name, level).render()
        if force_history or level in HISTORY_LEVELS:
            config.append_to_history(plain)
        message = level.colorize(plain) if config.use_colors else plain
        self._toolkit.console.emit(message, weight=level.weight, stack_trace=stack_trace)


def _craft_record(toolkit: _PipelineToolkit, value: Any, name: str, level: LogLevel) -> LogRecord:
    config = toolkit.config
    return LogRecord(
        level=level,
        value=value,
        name=name,
        timestamp=toolkit.clock.now() if config.show_timestamp else None,
        glyph=level.icon if config.show_emoji else "",
    )


def _divider_line(title: str) -> str:
    separator = "=" * DIVIDER_WIDTH
    if not title:
        return separator
    return f"{separator} {title} {separator}"


__all__ = ["DIVIDER_WIDTH", "EmitCallable", "HISTORY_LEVELS", "create_emit_log", "create_write_divider"]
