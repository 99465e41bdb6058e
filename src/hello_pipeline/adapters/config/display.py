"""Display configuration through lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from hello_pipeline.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` as TOML-like text or JSON.

    Pending log events are flushed first so they never interleave with the
    rendered configuration.

    Args:
        config: Already-loaded layered configuration.
        output_format: ``OutputFormat.HUMAN`` or ``OutputFormat.JSON``.
        section: Render only this top-level section.
        console: Rich Console to render on; tests pass a recording console.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
