"""Optional ``.env`` loading for the CLI and host applications.

Purpose
-------
Let operators keep ``INLINE_LOG_*`` settings in a ``.env`` file next to the
project instead of exporting them in every shell.

Contents
--------
* :data:`DOTENV_ENV_VAR` – environment toggle read by the CLI.
* :func:`should_use_dotenv` – precedence between CLI flag and toggle.
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "INLINE_LOG_USE_DOTENV"

LOGGER = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` should be loaded.

    An explicit CLI flag wins; otherwise the ``INLINE_LOG_USE_DOTENV`` value
    decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. The search runs once per
    process; later calls return the path loaded the first time.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        candidate = _find_dotenv(search_from)
        if candidate is None:
            LOGGER.debug("no .env file found")
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate
        LOGGER.debug("loaded environment from %s", candidate)
        return candidate


def _find_dotenv(start: Path | None = None) -> Path | None:
    if start is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
