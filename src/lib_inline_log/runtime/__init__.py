"""Runtime façade holding the process-wide inline logger.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``inspect_runtime``,
``shutdown``) that host applications use instead of wiring the inner layers
themselves.

Contents
--------
* ``init`` – composition root; resolves settings and installs the logger.
* ``get`` – accessor for the installed :class:`Logger`.
* ``inspect_runtime`` – read-only snapshot of the active settings.
* ``shutdown`` – clears the singleton so ``init`` can run again.
* ``summary_info`` – metadata banner shared with the CLI.

System Role
-----------
The single-instance-per-process configuration lives here; everything below
it takes the configuration by reference, so tests can skip this module and
build independent :class:`Logger` objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from lib_inline_log.application.ports import ClockPort
from lib_inline_log.domain import LogLevel
from lib_inline_log.logger import Logger

from ._composition import ConsoleFactory, build_runtime
from ._settings import RuntimeSettings, build_runtime_settings
from ._state import clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    development: bool
    enabled: bool
    min_level: LogLevel
    show_timestamp: bool
    show_emoji: bool
    use_colors: bool
    max_history_size: int
    history_length: int
    sink: str
    dropped: int


def init(
    *,
    development: bool | None = None,
    enabled: bool | None = None,
    min_level: LogLevel | str | int = LogLevel.DEBUG,
    show_timestamp: bool = True,
    show_emoji: bool = True,
    use_colors: bool = True,
    max_history_size: int = 100,
    sink: str = "rich",
    force_color: bool = False,
    no_color: bool = False,
    console_factory: ConsoleFactory | None = None,
    clock: ClockPort | None = None,
) -> Logger:
    """Compose the inline logger and install it as the process singleton.

    Inputs
    ------
    development:
        Build profile supplied by the host. ``enabled`` defaults to this
        value; ``None`` falls back to ``INLINE_LOG_PROFILE`` and then to the
        interpreter's ``__debug__`` flag.
    enabled, min_level, show_timestamp, show_emoji, use_colors, max_history_size:
        Initial :class:`LoggerConfig` values; the config stays mutable.
    sink, force_color, no_color:
        Console sink selection (``"rich"`` or ``"logging"``) and Rich colour
        overrides.
    console_factory, clock:
        Injection points for custom sinks and deterministic timestamps.

    Outputs
    -------
    The installed :class:`Logger`.

    Side Effects
    ------------
    Raises :class:`RuntimeError` if called while a runtime is already active.
    ``INLINE_LOG_*`` environment variables override the keyword arguments.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_inline_log.init() cannot be called twice without shutdown(); call lib_inline_log.shutdown() first",
        )

    settings = build_runtime_settings(
        development=development,
        enabled=enabled,
        min_level=min_level,
        show_timestamp=show_timestamp,
        show_emoji=show_emoji,
        use_colors=use_colors,
        max_history_size=max_history_size,
        sink=sink,
        force_color=force_color,
        no_color=no_color,
    )
    logger = build_runtime(settings, console_factory=console_factory, clock=clock)
    set_runtime(logger, settings)
    return logger


def get() -> Logger:
    """Return the installed logger; raises :class:`RuntimeError` before ``init``."""

    logger, _settings = current_runtime()
    return logger


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    logger, settings = current_runtime()
    config = logger.config.snapshot()
    console = logger.console
    return RuntimeSnapshot(
        development=settings.development,
        enabled=config.enabled,
        min_level=config.min_level,
        show_timestamp=config.show_timestamp,
        show_emoji=config.show_emoji,
        use_colors=config.use_colors,
        max_history_size=config.max_history_size,
        history_length=config.history_length,
        sink=settings.sink,
        dropped=getattr(console, "dropped", 0),
    )


def shutdown() -> None:
    """Clear the runtime singleton; raises :class:`RuntimeError` when none is active."""

    current_runtime()
    clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "RuntimeSettings",
    "RuntimeSnapshot",
    "build_runtime_settings",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "summary_info",
]
