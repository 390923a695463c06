"""Use cases composing the log pipeline."""

from __future__ import annotations

from .emit_log import HISTORY_LEVELS, EmitCallable, create_emit_log, create_write_divider

__all__ = ["EmitCallable", "HISTORY_LEVELS", "create_emit_log", "create_write_divider"]
