"""Greeting and metadata commands.

Contents:
    * :func:`cli_hello` - Run the greeting pipeline.
    * :func:`cli_info` - Display package metadata.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_pipeline import __init__conf__
from hello_pipeline.application.processor import process_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Print the formatted greeting line to standard output.

    A failing write is not handled here; it surfaces as a non-zero exit code.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Executing hello command")
        process_greeting(cli_ctx.services.create_output_sink())


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_hello", "cli_info"]
