"""Package metadata shared by the CLI banner and packaging checks."""

from __future__ import annotations

from typing import Callable

name = "lib_inline_log"
title = "Chainable inline console logging with emoji levels, colour and bounded history"
version = "0.1.0"
author = "lib_inline_log contributors"
shell_command = "lib_inline_log"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to ``print``)."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["author", "name", "print_info", "shell_command", "title", "version"]
