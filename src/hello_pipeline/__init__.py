"""hello_pipeline: assemble, format and print the canonical greeting.

The names below are the library surface; the CLI lives in
:mod:`hello_pipeline.adapters.cli` and is wired in :mod:`hello_pipeline.entry`.

Example:
    >>> from hello_pipeline import MessageFormatter, TextAssembler
    >>> MessageFormatter().format_message(TextAssembler().get_text())
    '[Formatted]: Hello, World!'
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config import get_config
from .application.processor import MessageProcessor, process_greeting
from .domain.behaviors import (
    CANONICAL_GREETING,
    MessageFormatter,
    TextAssembler,
    build_greeting,
    format_message,
)
from .domain.characters import GREETING_SEQUENCE, CharacterSource

__all__ = [
    "CANONICAL_GREETING",
    "GREETING_SEQUENCE",
    "CharacterSource",
    "MessageFormatter",
    "MessageProcessor",
    "TextAssembler",
    "build_greeting",
    "format_message",
    "get_config",
    "print_info",
    "process_greeting",
]
