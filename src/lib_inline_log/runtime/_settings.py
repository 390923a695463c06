"""Runtime settings resolution: keyword arguments plus environment overrides.

Purpose
-------
Turn the arguments of :func:`lib_inline_log.runtime.init` and the
``INLINE_LOG_*`` environment variables into a frozen
:class:`RuntimeSettings` consumed by the composition root.

System Role
-----------
The configuration boundary: malformed values are rejected here with a
:class:`ValueError` naming the offending variable, so the pipeline itself
never fails.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from lib_inline_log.domain import LogLevel, coerce_level
from lib_inline_log.domain.config import DEFAULT_MAX_HISTORY_SIZE

ENV_PREFIX = "INLINE_LOG_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
_PROFILES = {
    "development": True,
    "dev": True,
    "debug": True,
    "production": False,
    "prod": False,
    "release": False,
}
SINK_CHOICES = ("rich", "logging")


@dataclass(frozen=True)
class RuntimeSettings:
    """Resolved settings used to build the runtime logger."""

    development: bool
    enabled: bool
    min_level: LogLevel
    show_timestamp: bool
    show_emoji: bool
    use_colors: bool
    max_history_size: int
    sink: str
    force_color: bool
    no_color: bool


def build_runtime_settings(
    *,
    development: bool | None = None,
    enabled: bool | None = None,
    min_level: LogLevel | str | int = LogLevel.DEBUG,
    show_timestamp: bool = True,
    show_emoji: bool = True,
    use_colors: bool = True,
    max_history_size: int = DEFAULT_MAX_HISTORY_SIZE,
    sink: str = "rich",
    force_color: bool = False,
    no_color: bool = False,
    environ: Mapping[str, str] | None = None,
) -> RuntimeSettings:
    """Merge keyword arguments with ``INLINE_LOG_*`` overrides.

    Environment values win over arguments. Without an explicit profile the
    interpreter's ``__debug__`` flag decides, so ``python -O`` behaves like a
    release build.

    Examples
    --------
    >>> settings = build_runtime_settings(environ={"INLINE_LOG_MIN_LEVEL": "error"})
    >>> settings.min_level
    <LogLevel.ERROR: 5>
    >>> build_runtime_settings(development=False, environ={}).enabled
    False
    """

    env = os.environ if environ is None else environ

    resolved_development = _env_profile(env, development if development is not None else __debug__)
    resolved_enabled = _env_bool(env, "ENABLED", enabled if enabled is not None else resolved_development)
    resolved_sink = _env_str(env, "SINK", sink).strip().lower()
    if resolved_sink not in SINK_CHOICES:
        raise ValueError(f"{ENV_PREFIX}SINK must be one of {', '.join(SINK_CHOICES)}; got {resolved_sink!r}")

    return RuntimeSettings(
        development=resolved_development,
        enabled=resolved_enabled,
        min_level=_env_level(env, "MIN_LEVEL", min_level),
        show_timestamp=_env_bool(env, "SHOW_TIMESTAMP", show_timestamp),
        show_emoji=_env_bool(env, "SHOW_EMOJI", show_emoji),
        use_colors=_env_bool(env, "USE_COLORS", use_colors),
        max_history_size=_env_int(env, "HISTORY_SIZE", max_history_size),
        sink=resolved_sink,
        force_color=_env_bool(env, "FORCE_COLOR", force_color),
        no_color=_env_bool(env, "NO_COLOR", no_color),
    )


def _lookup(env: Mapping[str, str], key: str) -> str | None:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_str(env: Mapping[str, str], key: str, default: str) -> str:
    raw = _lookup(env, key)
    return default if raw is None else raw


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = _lookup(env, key)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{ENV_PREFIX}{key} must be a boolean flag (1/0, true/false, yes/no, on/off); got {raw!r}")


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = _lookup(env, key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{key} must be an integer; got {raw!r}") from exc


def _env_level(env: Mapping[str, str], key: str, default: LogLevel | str | int) -> LogLevel:
    raw = _lookup(env, key)
    if raw is None:
        return coerce_level(default)
    try:
        if raw.lstrip("-").isdigit():
            return coerce_level(int(raw))
        return LogLevel.from_name(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{key} is not a known level; got {raw!r}") from exc


def _env_profile(env: Mapping[str, str], default: bool) -> bool:
    raw = _lookup(env, "PROFILE")
    if raw is None:
        return default
    try:
        return _PROFILES[raw.lower()]
    except KeyError as exc:
        raise ValueError(f"{ENV_PREFIX}PROFILE must be 'development' or 'production'; got {raw!r}") from exc


__all__ = ["ENV_PREFIX", "RuntimeSettings", "SINK_CHOICES", "build_runtime_settings"]
