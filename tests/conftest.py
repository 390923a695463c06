from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_inline_log import runtime
from lib_inline_log.domain import LoggerConfig
from lib_inline_log.logger import Logger

FIXED_NOW = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)


@dataclass
class RecordedLine:
    message: str
    weight: int
    stack_trace: str | None


@dataclass
class RecordingConsole:
    lines: list[RecordedLine] = field(default_factory=list)

    def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
        self.lines.append(RecordedLine(message, weight, stack_trace))

    @property
    def messages(self) -> list[str]:
        return [line.message for line in self.lines]


class FixedClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def plain_config() -> LoggerConfig:
    """Config with every decoration switched off so renderings are exact."""

    return LoggerConfig(show_timestamp=False, show_emoji=False, use_colors=False)


@pytest.fixture
def plain_logger(plain_config: LoggerConfig, recording_console: RecordingConsole, fixed_clock: FixedClock) -> Logger:
    return Logger(plain_config, recording_console, clock=fixed_clock)


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop INLINE_LOG_* variables and any runtime left behind by a test."""

    for key in list(os.environ):
        if key.startswith("INLINE_LOG_"):
            monkeypatch.delenv(key, raising=False)
    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()
