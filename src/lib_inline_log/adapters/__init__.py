"""Adapter implementations for the inline logger ports."""

from __future__ import annotations

from .clock import SystemClock
from .console.logging_console import LoggingConsoleAdapter
from .console.rich_console import RichConsoleAdapter
from .console.safe_console import SafeConsoleAdapter

__all__ = [
    "LoggingConsoleAdapter",
    "RichConsoleAdapter",
    "SafeConsoleAdapter",
    "SystemClock",
]
