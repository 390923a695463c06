from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_inline_log.domain import LogLevel, LogRecord


@pytest.mark.parametrize("level", list(LogLevel))
def test_all_toggles_off_renders_label_and_value_only(level: LogLevel) -> None:
    assert LogRecord(level, "value").render() == f" [{level.label}] value"


def test_name_is_prefixed_with_at_sign() -> None:
    assert LogRecord(LogLevel.INFO, "value", name="api").render() == " [INFO] @api value"


def test_glyph_without_timestamp() -> None:
    record = LogRecord(LogLevel.SUCCESS, "saved", glyph=LogLevel.SUCCESS.icon)
    assert record.render() == "✅ [SUCCESS] saved"


def test_timestamp_is_rendered_in_utc_with_milliseconds() -> None:
    local = timezone(timedelta(hours=2))
    ts = datetime(2025, 9, 30, 14, 0, 0, 123456, tzinfo=local)
    record = LogRecord(LogLevel.DEBUG, "x", name="k", timestamp=ts, glyph="🔍")
    assert record.render() == "[2025-09-30T12:00:00.123+00:00] 🔍 [DEBUG] @k x"


def test_naive_timestamps_are_read_as_local_time() -> None:
    naive = datetime(2025, 1, 1, 8, 30)
    expected = naive.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    record = LogRecord(LogLevel.INFO, "x", timestamp=naive)

    assert record.timestamp is not None
    assert record.timestamp.utcoffset() == timedelta(0)
    assert record.render() == f"[{expected}] [INFO] x"


def test_value_uses_str_conversion() -> None:
    class Point:
        def __str__(self) -> str:
            return "Point(1, 2)"

    assert LogRecord(LogLevel.INFO, Point()).render() == " [INFO] Point(1, 2)"
    assert LogRecord(LogLevel.INFO, {"a": 1}).render() == " [INFO] {'a': 1}"
    assert LogRecord(LogLevel.INFO, None).render() == " [INFO] None"
