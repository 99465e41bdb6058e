"""Command-line interface of hello_pipeline.

``cli`` is the rich-click group, ``main`` the process boundary around it.
The traceback helpers are re-exported for callers that drive ``main``
from their own code.
"""

from __future__ import annotations

from .commands import cli_config, cli_hello, cli_info, cli_logdemo
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
