"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; ``tests/test_metadata.py``
checks that they agree.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "hello_pipeline"
title: Final[str] = "Assemble, format and print the canonical greeting"
version: Final[str] = "1.0.0"
author: Final[str] = "bitranox"
shell_command: Final[str] = "hello-pipeline"

#: Identifiers lib_layered_config uses to build platform-specific config paths.
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
LAYEREDCONF_APP: Final[str] = "Hello Pipeline"
LAYEREDCONF_SLUG: Final[str] = "hello-pipeline"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_pipeline:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
