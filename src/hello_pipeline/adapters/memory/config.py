"""Configuration ports served from memory.

Nothing is read from disk or the environment, so tests get the same empty
configuration on every machine.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty Config whatever profile is asked for."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    # Never created; callers only inspect the path.
    return Path(tempfile.gettempdir()) / "hello_pipeline" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Render nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
