"""Application ports: Protocol definitions for pipeline parts and adapters.

Callable ports define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them
through structural subtyping (PEP 544). Object ports describe the three
collaborators the message processor drives.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..domain.enums import OutputFormat, SinkCapability

if TYPE_CHECKING:
    from lib_layered_config import Config


# ======================== Pipeline collaborators ========================


class TextSource(Protocol):
    """Anything that produces the text to be formatted."""

    def get_text(self) -> str: ...


@runtime_checkable
class RefreshableTextSource(Protocol):
    """Text source that must be refreshed before its text is read."""

    def get_text(self) -> str: ...

    def refresh_source(self) -> None: ...


class Formatter(Protocol):
    """Map a message to its formatted form."""

    def format_message(self, message: str) -> str: ...


class OutputSink(Protocol):
    """Line-oriented writer with a declared capability.

    ``execute_print`` is only called when ``capability`` is
    :attr:`SinkCapability.LABELED`.
    """

    @property
    def capability(self) -> SinkCapability: ...

    def print(self, text: str) -> None: ...

    def execute_print(self, formatted_message: str) -> None: ...


# ======================== Adapter functions ========================


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class CreateOutputSink(Protocol):
    """Return the output sink the greeting pipeline writes to."""

    def __call__(self) -> OutputSink: ...


__all__ = [
    "CreateOutputSink",
    "DisplayConfig",
    "Formatter",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "OutputSink",
    "RefreshableTextSource",
    "TextSource",
]
