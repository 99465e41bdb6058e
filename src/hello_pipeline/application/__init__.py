"""Application layer - use cases and port definitions.

Contains the message processor use case and the port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Protocol definitions for pipeline parts and adapter functions
    * :mod:`.processor` - The message processor use case
"""

from __future__ import annotations

from .ports import (
    CreateOutputSink,
    DisplayConfig,
    Formatter,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    OutputSink,
    RefreshableTextSource,
    TextSource,
)
from .processor import MessageProcessor, process_greeting

__all__ = [
    "CreateOutputSink",
    "DisplayConfig",
    "Formatter",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "MessageProcessor",
    "OutputSink",
    "RefreshableTextSource",
    "TextSource",
    "process_greeting",
]
