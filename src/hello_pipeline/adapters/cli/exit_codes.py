"""POSIX-conventional exit codes for CLI error paths.

Signal and pipe codes (130, 141) are informational only; the application
never raises ``SystemExit`` with them. ``lib_cli_exit_tools`` translates
``KeyboardInterrupt`` and ``BrokenPipeError`` on its own.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141


__all__ = ["ExitCode"]
