"""Bounded history storing the most recent plain log lines.

Purpose
-------
Keep warning-and-above lines (or explicitly forced ones) in memory so hosts
can attach them to crash reports without relying on an external target.

Contents
--------
* :class:`LogHistory` with FIFO eviction, snapshotting and a resizable bound.

System Role
-----------
Owned by :class:`lib_inline_log.domain.config.LoggerConfig`; written by the
emit pipeline, read by hosts through ``read_history``.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterator


class LogHistory:
    """Thread-safe FIFO buffer retaining at most ``max_entries`` strings.

    Examples
    --------
    >>> history = LogHistory(max_entries=2)
    >>> for line in ("a", "b", "c"):
    ...     history.append(line)
    >>> history.snapshot()
    ('b', 'c')
    """

    def __init__(self, *, max_entries: int = 100) -> None:
        self._lock = threading.Lock()
        self._entries: Deque[str] = deque()
        self._max_entries = _clamp(max_entries)

    @property
    def max_entries(self) -> int:
        """Return the configured upper bound."""

        return self._max_entries

    @max_entries.setter
    def max_entries(self, value: int) -> None:
        """Change the bound, evicting the oldest entries that no longer fit."""
        with self._lock:
            self._max_entries = _clamp(value)
            self._evict()

    def append(self, entry: str) -> None:
        """Append ``entry`` and evict from the front until within bound."""

        with self._lock:
            self._entries.append(entry)
            self._evict()

    def snapshot(self) -> tuple[str, ...]:
        """Return an immutable copy of the retained entries, oldest first."""

        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        """Remove every retained entry."""
        with self._lock:
            self._entries.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict(self) -> None:
        # caller holds the lock
        while len(self._entries) > self._max_entries:
            self._entries.popleft()


def _clamp(value: int) -> int:
    return value if value > 0 else 0


__all__ = ["LogHistory"]
