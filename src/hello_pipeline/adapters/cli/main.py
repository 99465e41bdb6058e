"""Process boundary of the command-line interface.

Console scripts and ``python -m hello_pipeline`` all end in :func:`main`,
which runs the command group once and turns whatever happened into an
exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_pipeline import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_pipeline.composition import AppServices


def _invoke_group(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the root group without Click's own ``sys.exit`` handling.

    ``lib_cli_exit_tools.run_cli`` cannot hand ``obj`` to Click, so the
    group is called directly and Click's exits are unwrapped here.
    """
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return int(ExitCode.SUCCESS)


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code.

    The message is truncated unless ``--traceback`` was given.
    """
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # A worker thread must not tear down the runtime the main thread still uses.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return its exit code.

    Args:
        argv: Arguments without the program name. None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back to their prior
            values afterwards.
        services_factory: Returns the wired AppServices. Required; callers
            pass ``build_production`` from the composition root.

    Returns:
        0 after a successful run, otherwise the code of the failure.

    Raises:
        ValueError: If no services factory was given.

    Example:
        >>> from hello_pipeline.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        [Strategy]: [Formatted]: Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    previous_state = snapshot_traceback_state()
    try:
        return _invoke_group(args, services_factory)
    except BaseException as exc:  # noqa: BLE001
        return _report_failure(exc)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        _shutdown_logging()


__all__ = ["main"]
