"""Ephemeral log record rendered once per pipeline call.

Purpose
-------
Capture the pieces of a single log line (timestamp, glyph, label, name,
value) and render the plain, uncoloured message from them.

Contents
--------
* :class:`LogRecord` dataclass with :meth:`LogRecord.render`.

System Role
-----------
Created by the emit pipeline and discarded after rendering; only the
rendered string is ever retained in history.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Normalise ``ts`` to UTC; naive values are read as local time."""
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Single log line before rendering.

    Attributes
    ----------
    level:
        :class:`LogLevel` providing the label.
    value:
        Arbitrary object; rendered with :func:`str`.
    name:
        Optional key shown as ``@name``; omitted entirely when empty.
    timestamp:
        Optional timestamp, naive values taken as local time; omitted
        entirely when ``None``.
    glyph:
        Optional emoji shown before the label.
    """

    level: LogLevel
    value: Any
    name: str = ""
    timestamp: datetime | None = None
    glyph: str = ""

    def __post_init__(self) -> None:
        if self.timestamp is not None:
            object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))

    def render(self) -> str:
        """Return the plain rendering of the record.

        Examples
        --------
        >>> LogRecord(LogLevel.INFO, "value").render()
        ' [INFO] value'
        >>> LogRecord(LogLevel.ERROR, 42, name="api").render()
        ' [ERROR] @api 42'
        >>> ts = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
        >>> LogRecord(LogLevel.DEBUG, "x", timestamp=ts, glyph="*").render()
        '[2025-09-30T12:00:00.000+00:00] * [DEBUG] x'
        """

        head = " ".join(part for part in (self._timestamp_text(), self.glyph) if part)
        key = f"@{self.name} " if self.name else ""
        return f"{head} [{self.level.label}] {key}{self.value}"

    def _timestamp_text(self) -> str:
        if self.timestamp is None:
            return ""
        return f"[{self.timestamp.isoformat(timespec='milliseconds')}]"


__all__ = ["LogRecord"]
