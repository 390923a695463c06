from __future__ import annotations

import pytest

import lib_inline_log as log
from lib_inline_log.domain import LogLevel

from tests.conftest import FixedClock, RecordingConsole


def test_logged_without_runtime_or_logger_raises() -> None:
    with pytest.raises(RuntimeError, match="init"):
        log.logged(1)


def test_logged_uses_explicit_logger(plain_logger, recording_console: RecordingConsole) -> None:
    result = log.logged("value", "key", LogLevel.INFO, logger=plain_logger)
    assert result == "value"
    assert recording_console.messages == [" [INFO] @key value"]


def test_logged_uses_runtime_logger() -> None:
    console = RecordingConsole()
    log.init(
        development=True,
        show_timestamp=False,
        show_emoji=False,
        use_colors=False,
        console_factory=lambda _settings: console,
        clock=FixedClock(),
    )

    total = log.logged(sum([1, 2, 3]), "total") * 2

    assert total == 12
    assert console.messages == [" [DEBUG] @total 6"]


@pytest.mark.parametrize(
    "helper, label",
    [
        (log.logged_debug, "DEBUG"),
        (log.logged_verbose, "VERBOSE"),
        (log.logged_info, "INFO"),
        (log.logged_success, "SUCCESS"),
        (log.logged_warning, "WARNING"),
        (log.logged_error, "ERROR"),
        (log.logged_critical, "CRITICAL"),
    ],
)
def test_level_specific_helpers(plain_logger, recording_console: RecordingConsole, helper, label: str) -> None:
    obj = object()
    assert helper(obj, "", logger=plain_logger) is obj
    assert recording_console.messages == [f" [{label}] {obj}"]
