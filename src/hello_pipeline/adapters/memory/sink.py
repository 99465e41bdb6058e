"""In-memory output sink for testing.

Provides a sink that satisfies the OutputSink protocol but records lines
instead of writing to standard output.

Contents:
    * :class:`SinkSpy` - Captures emitted lines for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.behaviors import STRATEGY_LABEL
from ...domain.enums import SinkCapability


def _empty_line_list() -> list[str]:
    """Create an empty typed list for captured lines."""
    return []


@dataclass
class SinkSpy:
    """Captures sink writes for test assertions.

    Each test should create its own SinkSpy instance to avoid cross-test pollution.

    Attributes:
        lines: Every line written, labels included, in write order.
        calls: Name of the sink method used for each line (``print`` or ``execute_print``).
        capability: Capability the spy declares to the processor.
        raise_exception: When set, writes raise this exception instead of recording.

    Example:
        >>> spy = SinkSpy()
        >>> spy.execute_print("[Formatted]: Hi")
        >>> spy.lines
        ['[Strategy]: [Formatted]: Hi']
        >>> plain = SinkSpy(capability=SinkCapability.PLAIN)
        >>> plain.print("Hi")
        >>> plain.calls
        ['print']
    """

    lines: list[str] = field(default_factory=_empty_line_list)
    calls: list[str] = field(default_factory=_empty_line_list)
    capability: SinkCapability = SinkCapability.LABELED
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.lines.clear()
        self.calls.clear()
        self.raise_exception = None

    def _write(self, text: str, method: str) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.calls.append(method)
        self.lines.append(text)

    def print(self, text: str) -> None:
        self._write(text, "print")

    def execute_print(self, formatted_message: str) -> None:
        self._write(STRATEGY_LABEL + formatted_message, "execute_print")

    def create(self) -> SinkSpy:
        """Return this spy; satisfies the CreateOutputSink protocol."""
        return self


__all__ = ["SinkSpy"]
