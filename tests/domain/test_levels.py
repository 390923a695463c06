from __future__ import annotations

import logging

import pytest

from lib_inline_log.domain.levels import ANSI_RESET, LogLevel, coerce_level

ORDERED = [
    LogLevel.DEBUG,
    LogLevel.VERBOSE,
    LogLevel.INFO,
    LogLevel.SUCCESS,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


def test_priorities_are_unique_and_ascending() -> None:
    priorities = [level.priority for level in ORDERED]
    assert priorities == list(range(7))
    assert list(LogLevel) == ORDERED


def test_levels_compare_by_priority() -> None:
    assert LogLevel.DEBUG < LogLevel.VERBOSE < LogLevel.CRITICAL
    assert LogLevel.WARNING >= LogLevel.WARNING
    assert LogLevel.ERROR > LogLevel.SUCCESS
    assert sorted(reversed(ORDERED)) == ORDERED


def test_comparison_with_other_types_is_unsupported() -> None:
    with pytest.raises(TypeError):
        LogLevel.INFO < 3  # noqa: B015


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("Verbose", LogLevel.VERBOSE),
        ("INFO", LogLevel.INFO),
        (" success ", LogLevel.SUCCESS),
        ("critical", LogLevel.CRITICAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("trace")


@pytest.mark.parametrize("number", [-1, 7, 10])
def test_from_numeric_rejects_unknown_priorities(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(number)


@pytest.mark.parametrize(
    "level, label, icon",
    [
        (LogLevel.DEBUG, "DEBUG", "🔍"),
        (LogLevel.VERBOSE, "VERBOSE", "📝"),
        (LogLevel.INFO, "INFO", "ℹ️"),
        (LogLevel.SUCCESS, "SUCCESS", "✅"),
        (LogLevel.WARNING, "WARNING", "⚠️"),
        (LogLevel.ERROR, "ERROR", "❌"),
        (LogLevel.CRITICAL, "CRITICAL", "🚨"),
    ],
)
def test_level_label_and_icon_table(level: LogLevel, label: str, icon: str) -> None:
    assert level.label == label
    assert level.icon == icon


@pytest.mark.parametrize(
    "level, weight, python_level",
    [
        (LogLevel.DEBUG, 500, logging.DEBUG),
        (LogLevel.VERBOSE, 500, logging.DEBUG),
        (LogLevel.INFO, 800, logging.INFO),
        (LogLevel.SUCCESS, 800, logging.INFO),
        (LogLevel.WARNING, 900, logging.WARNING),
        (LogLevel.ERROR, 1000, logging.ERROR),
        (LogLevel.CRITICAL, 1200, logging.CRITICAL),
    ],
)
def test_weight_groups_and_python_levels(level: LogLevel, weight: int, python_level: int) -> None:
    assert level.weight == weight
    assert level.to_python_level() == python_level


def test_weights_never_decrease_with_priority() -> None:
    weights = [level.weight for level in ORDERED]
    assert weights == sorted(weights)


@pytest.mark.parametrize("level", list(LogLevel))
def test_colorize_wraps_with_level_color_and_reset(level: LogLevel) -> None:
    colored = level.colorize("text")
    assert colored.startswith(level.color)
    assert colored.endswith(ANSI_RESET)
    assert colored[len(level.color) : -len(ANSI_RESET)] == "text"


def test_coerce_level_accepts_members_names_and_priorities() -> None:
    assert coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    assert coerce_level("warning") is LogLevel.WARNING
    assert coerce_level(3) is LogLevel.SUCCESS


@pytest.mark.parametrize("bad", [True, 2.5, None])
def test_coerce_level_rejects_other_types(bad: object) -> None:
    with pytest.raises(TypeError):
        coerce_level(bad)  # type: ignore[arg-type]
