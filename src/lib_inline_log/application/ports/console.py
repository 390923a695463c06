"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for sinks that receive fully rendered log lines,
letting the pipeline depend on a narrow protocol instead of Rich or the
stdlib :mod:`logging` module.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method.

System Role
-----------
The only outbound boundary of the pipeline. Implementations are expected to
return quickly; :class:`lib_inline_log.adapters.SafeConsoleAdapter` contains
failures so logging never breaks the caller.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write a rendered log line to a console or debug channel."""

    def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
        """Write ``message``; ``weight`` grows with severity."""


__all__ = ["ConsolePort"]
