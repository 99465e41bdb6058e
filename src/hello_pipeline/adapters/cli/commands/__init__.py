"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Greeting and info commands from :mod:`.greeting`
    * Config command from :mod:`.config`
    * Logging demo command from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .greeting import cli_hello, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
