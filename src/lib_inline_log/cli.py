"""Command-line interface built on rich-click.

Purpose
-------
Offer a quick way to see the inline logger in action (``demo``), inspect the
settings the environment resolves to (``settings``) and print package
metadata (``info``).

Contents
--------
* :func:`cli` – root group with traceback and ``.env`` switches.
* :func:`main` – entry point running the group through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import dataclasses
import os
from datetime import timedelta
from traceback import format_exc
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as dotenv_config
from .domain import LogLevel
from .runtime import build_runtime_settings, init, shutdown, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.name.lower() for level in LogLevel]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load INLINE_LOG_* variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Inline console logger: levels, emoji, colour and bounded history."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit = None if ctx.get_parameter_source("use_dotenv") is ParameterSource.DEFAULT else use_dotenv
    if dotenv_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(dotenv_config.DOTENV_ENV_VAR)):
        dotenv_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("settings", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_settings() -> None:
    """Print the settings resolved from defaults and INLINE_LOG_* variables."""

    settings = build_runtime_settings()
    for field in dataclasses.fields(settings):
        value = getattr(settings, field.name)
        if isinstance(value, LogLevel):
            value = value.name.lower()
        click.echo(f"{field.name:<16} = {value}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--min-level", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default="debug", show_default=True)
@click.option("--no-color", is_flag=True, default=False, help="Emit plain lines without colour codes.")
@click.option("--no-emoji", is_flag=True, default=False, help="Hide the level glyphs.")
@click.option("--no-timestamp", is_flag=True, default=False, help="Hide timestamps.")
@click.option("--history-size", type=int, default=100, show_default=True, help="Lines retained in history.")
def cli_demo(min_level: str, no_color: bool, no_emoji: bool, no_timestamp: bool, history_size: int) -> None:
    """Emit one line per level plus the structured helpers, then print history."""

    logger = init(
        development=True,
        min_level=min_level,
        use_colors=not no_color,
        no_color=no_color,
        show_emoji=not no_emoji,
        show_timestamp=not no_timestamp,
        max_history_size=history_size,
    )
    try:
        logger.header("LEVELS")
        logger.debug("cache warmed", "Cache")
        logger.verbose({"hits": 12, "misses": 3}, "Cache")
        logger.info("user signed in", "Auth")
        logger.success("profile saved", "Profile")
        logger.warning("retrying request", "Network")
        try:
            raise ValueError("card declined")
        except ValueError:
            logger.error("payment failed", "Checkout", format_exc())
        logger.critical("database unreachable", "Storage")

        logger.api_request(endpoint="/users/42", method="GET", headers={"Accept": "application/json"})
        logger.api_response(
            endpoint="/users/42",
            status_code=200,
            data={"id": 42, "name": "Ada"},
            duration=timedelta(milliseconds=135),
        )
        logger.navigation("/home", "/settings")
        logger.lifecycle("resumed", "app returned to foreground")
        logger.state("cart", ["apple", "pear"])

        history = logger.config.read_history()
        click.echo(f"--- history ({len(history)} of max {logger.config.max_history_size}) ---")
        for entry in history:
            click.echo(entry)
    finally:
        shutdown()


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through ``lib_cli_exit_tools`` and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
