"""Type-safe domain enums for output formats and sink capabilities."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class SinkCapability(str, Enum):
    """Write modes an output sink can offer the message processor.

    The processor uses the labeled mode whenever a sink declares it and only
    falls back to the plain write otherwise.

    Attributes:
        PLAIN: Write the text unchanged followed by a line terminator.
        LABELED: Prepend the ``[Strategy]: `` label before writing.

    Example:
        >>> SinkCapability.LABELED.value
        'labeled'
        >>> SinkCapability.PLAIN == "plain"
        True
    """

    PLAIN = "plain"
    LABELED = "labeled"


__all__ = [
    "OutputFormat",
    "SinkCapability",
]
