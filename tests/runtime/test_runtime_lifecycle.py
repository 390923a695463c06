from __future__ import annotations

import pytest

import lib_inline_log as log
from lib_inline_log.adapters import LoggingConsoleAdapter, RichConsoleAdapter, SafeConsoleAdapter
from lib_inline_log.domain import LogLevel

from tests.conftest import FixedClock, RecordingConsole


def _recording_init(console: RecordingConsole, **kwargs) -> log.Logger:
    return log.init(console_factory=lambda _settings: console, clock=FixedClock(), **kwargs)


def test_get_before_init_raises() -> None:
    assert not log.is_initialised()
    with pytest.raises(RuntimeError, match="init"):
        log.get()


def test_shutdown_without_init_raises() -> None:
    with pytest.raises(RuntimeError):
        log.shutdown()


def test_init_installs_singleton() -> None:
    logger = log.init(development=True)
    assert log.is_initialised()
    assert log.get() is logger
    log.shutdown()
    assert not log.is_initialised()


def test_init_twice_raises() -> None:
    log.init(development=True)
    with pytest.raises(RuntimeError, match="twice"):
        log.init(development=True)


def test_default_sink_is_wrapped_rich_console() -> None:
    logger = log.init(development=True)
    assert isinstance(logger.console, SafeConsoleAdapter)
    assert isinstance(logger.console.inner, RichConsoleAdapter)


def test_logging_sink_selection() -> None:
    logger = log.init(development=True, sink="logging")
    assert isinstance(logger.console.inner, LoggingConsoleAdapter)


@pytest.mark.parametrize("development", [True, False])
def test_enabled_follows_host_profile(development: bool) -> None:
    logger = log.init(development=development)
    assert logger.config.enabled is development


def test_production_profile_is_silent() -> None:
    console = RecordingConsole()
    logger = _recording_init(console, development=False)
    logger.critical("nobody hears this")
    assert console.lines == []
    assert logger.config.read_history() == ()


def test_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INLINE_LOG_PROFILE", "production")
    monkeypatch.setenv("INLINE_LOG_ENABLED", "1")
    monkeypatch.setenv("INLINE_LOG_MIN_LEVEL", "error")
    monkeypatch.setenv("INLINE_LOG_HISTORY_SIZE", "7")
    monkeypatch.setenv("INLINE_LOG_SHOW_EMOJI", "off")

    log.init(development=True, min_level="debug", max_history_size=100)
    snapshot = log.inspect_runtime()

    assert snapshot.development is False
    assert snapshot.enabled is True
    assert snapshot.min_level is LogLevel.ERROR
    assert snapshot.max_history_size == 7
    assert snapshot.show_emoji is False


def test_inspect_runtime_reports_history_and_drops() -> None:
    class BrokenConsole:
        def emit(self, message: str, *, weight: int, stack_trace: str | None = None) -> None:
            raise RuntimeError("sink gone")

    logger = log.init(development=True, console_factory=lambda _settings: BrokenConsole(), clock=FixedClock())
    logger.warning("still recorded")

    snapshot = log.inspect_runtime()
    assert snapshot.history_length == 1
    assert snapshot.dropped == 1
    assert snapshot.sink == "rich"


def test_runtime_config_is_shared_by_reference() -> None:
    console = RecordingConsole()
    logger = _recording_init(console, development=True, show_timestamp=False, show_emoji=False, use_colors=False)

    log.get().config.min_level = LogLevel.WARNING
    logger.info("hidden")
    logger.warning("shown")

    assert console.messages == [" [WARNING] shown"]


def test_summary_info_banner() -> None:
    summary = log.summary_info()
    assert summary.startswith("Info for lib_inline_log:")
    assert "version" in summary
    assert summary.endswith("\n")
    assert summary == log.summary_info()
