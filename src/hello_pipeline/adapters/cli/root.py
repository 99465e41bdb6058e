"""Root CLI command group and global option handling.

Defines the top-level Click group. Handles global flags like --traceback,
--profile, and --set, and runs the greeting pipeline when no subcommand
is given.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_pipeline import __init__conf__
from hello_pipeline.adapters.config.overrides import apply_overrides
from hello_pipeline.domain.errors import ConfigurationError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_pipeline.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load configuration for ``profile`` and apply ``--set`` overrides.

    Raises:
        click.UsageError: If the profile name or an override string is invalid.
    """
    try:
        config = services.get_config(profile=profile)
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Root command: load config, start logging, and store shared state.

    Without a subcommand the greeting pipeline runs, exactly as ``hello``.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_pipeline.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)  # doctest: +SKIP
        >>> result.stdout  # doctest: +SKIP
        '[Strategy]: [Formatted]: Hello, World!\\n'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile, set_overrides)
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_hello

        ctx.invoke(cli_hello)


# Commands import from package ancestors, so registration is deferred until
# ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_hello, cli_info, cli_logdemo

    for cmd in (cli_hello, cli_info, cli_config, cli_logdemo):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
