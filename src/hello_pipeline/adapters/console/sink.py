"""Standard output sink for the greeting pipeline.

Writes through ``click.echo`` so the same code path serves console
scripts, ``python -m`` and Click's ``CliRunner``. Escape sequences in the
text reach the stream unchanged.
"""

from __future__ import annotations

from typing import TextIO

import click

from hello_pipeline.domain.behaviors import STRATEGY_LABEL
from hello_pipeline.domain.enums import SinkCapability


class StandardOutputSink:
    """Write lines to standard output, optionally with the strategy label.

    Write failures (closed stream, broken pipe) are not caught here; they
    propagate to the CLI boundary.

    Args:
        stream: Optional text stream. ``None`` resolves ``sys.stdout`` at
            write time.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> StandardOutputSink(buffer).execute_print("[Formatted]: Hi")
        >>> buffer.getvalue()
        '[Strategy]: [Formatted]: Hi\\n'
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def capability(self) -> SinkCapability:
        return SinkCapability.LABELED

    def print(self, text: str) -> None:
        # color=True stops click from stripping escape sequences on non-tty streams.
        click.echo(text, file=self._stream, color=True)

    def execute_print(self, formatted_message: str) -> None:
        self.print(STRATEGY_LABEL + formatted_message)


def create_output_sink() -> StandardOutputSink:
    """Return a sink bound to the process's standard output."""
    return StandardOutputSink()


__all__ = [
    "StandardOutputSink",
    "create_output_sink",
]
