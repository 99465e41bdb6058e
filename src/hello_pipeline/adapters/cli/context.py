"""State shared between the root group and its subcommands.

Contents:
    * :class:`CLIContext` - what the root group resolved before dispatch.
    * :func:`store_cli_context` / :func:`get_cli_context` - ``ctx.obj`` access.
    * Traceback helpers mirroring ``lib_cli_exit_tools.config`` flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from hello_pipeline.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from hello_pipeline.composition import AppServices


class TracebackState(NamedTuple):
    """Snapshot of the two lib_cli_exit_tools traceback flags."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Everything the root group resolved before a subcommand runs.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Configuration for ``profile`` with ``set_overrides`` applied.
        services: Wired application services.
        profile: Profile named on the root group, if any.
        set_overrides: Raw ``--set`` strings as given on the command line.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return configuration for ``profile`` and the profile actually used.

        Without a profile the already resolved configuration is reused.
        Otherwise configuration is reloaded and the root ``--set`` overrides
        are applied again, so they win over every profile.

        Raises:
            click.UsageError: If the profile name or an override is invalid.
        """
        if not profile:
            return self.config, self.profile
        try:
            reloaded = self.services.get_config(profile=profile)
            return apply_overrides(reloaded, self.set_overrides), profile
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Put a :class:`CLIContext` into ``ctx.obj`` in place of the services factory."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the root group did not run first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch verbose, colored tracebacks on or off together.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    return TracebackState(
        enabled=bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        force_color=bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
