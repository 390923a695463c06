"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print rendered log lines through Rich so colour handling follows the
terminal capabilities (``NO_COLOR``, non-tty output, ``force_color``).

Contents
--------
* :class:`RichConsoleAdapter` - default sink constructed by
  :func:`lib_inline_log.runtime.init`.

System Role
-----------
Primary human-facing sink. The pipeline already embeds ANSI colour codes
when ``use_colors`` is on; this adapter translates them into Rich styles so
Rich decides whether the terminal gets escape sequences.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_inline_log.application.ports.console import ConsolePort
from lib_inline_log.domain.levels import CRITICAL_WEIGHT


class RichConsoleAdapter(ConsolePort):
    """Render log lines using Rich with optional colour overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the console adapter with colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._force_color = force_color
        self._no_color = no_color

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
        """Print ``message`` and, when given, ``stack_trace`` below it.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit("\\x1b[34m [INFO] hello\\x1b[0m", weight=800)
        >>> console.export_text()
        ' [INFO] hello\\n'
        """

        line = Text.from_ansi(message)
        style = "bold" if weight >= CRITICAL_WEIGHT and not self._no_color else ""
        self._console.print(line, style=style, highlight=False, soft_wrap=True)
        if stack_trace:
            self._console.print(
                Text(stack_trace.rstrip("\n")),
                style="" if self._no_color else "dim",
                highlight=False,
                soft_wrap=True,
            )


__all__ = ["RichConsoleAdapter"]
