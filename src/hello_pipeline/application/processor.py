"""Message processor, the single use case of the package.

Drives one linear pass: refresh the text source when it supports it,
obtain the text, format it, and emit it through the output sink.

Contents:
    * :class:`MessageProcessor` - orchestrates text source, formatter and sink.
    * :func:`process_greeting` - runs the default greeting pipeline on a sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.behaviors import MessageFormatter, TextAssembler
from ..domain.enums import SinkCapability
from .ports import Formatter, OutputSink, RefreshableTextSource, TextSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageProcessor:
    """Obtain, format and emit one message.

    The labeled sink mode always wins when the sink declares it; the plain
    write is the fallback for sinks that only offer
    :attr:`SinkCapability.PLAIN`.

    Attributes:
        text_source: Produces the raw message.
        formatter: Applies the text transformation.
        sink: Receives the formatted message.

    Example:
        >>> from hello_pipeline.adapters.memory import SinkSpy
        >>> spy = SinkSpy()
        >>> MessageProcessor(TextAssembler(), MessageFormatter(), spy).process_message()
        >>> spy.lines
        ['[Strategy]: [Formatted]: Hello, World!']
    """

    text_source: TextSource
    formatter: Formatter
    sink: OutputSink

    def process_message(self) -> None:
        if isinstance(self.text_source, RefreshableTextSource):
            logger.debug("Refreshing text source", extra={"source": type(self.text_source).__name__})
            self.text_source.refresh_source()

        message = self.text_source.get_text()
        logger.debug("Obtained message text", extra={"length": len(message)})

        formatted_message = self.formatter.format_message(message)
        logger.debug("Formatted message", extra={"formatted": formatted_message})

        if self.sink.capability is SinkCapability.LABELED:
            self.sink.execute_print(formatted_message)
        else:
            self.sink.print(formatted_message)
        logger.info(
            "Message emitted",
            extra={"payload": message, "capability": self.sink.capability.value},
        )


def process_greeting(sink: OutputSink) -> None:
    """Run the canonical greeting pipeline against ``sink``."""
    MessageProcessor(text_source=TextAssembler(), formatter=MessageFormatter(), sink=sink).process_message()


__all__ = [
    "MessageProcessor",
    "process_greeting",
]
