"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.characters` - Character sources and the greeting sequence
    * :mod:`.behaviors` - Text assembly and message formatting
    * :mod:`.enums` - Domain enumerations (OutputFormat, SinkCapability)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    FORMATTED_LABEL,
    STRATEGY_LABEL,
    MessageFormatter,
    TextAssembler,
    build_greeting,
    format_message,
)
from .characters import GREETING_SEQUENCE, CharacterSource, characters_of
from .enums import OutputFormat, SinkCapability
from .errors import ConfigurationError, InvalidCharacterError

__all__ = [
    # Characters
    "GREETING_SEQUENCE",
    "CharacterSource",
    "characters_of",
    # Behaviors
    "CANONICAL_GREETING",
    "FORMATTED_LABEL",
    "STRATEGY_LABEL",
    "MessageFormatter",
    "TextAssembler",
    "build_greeting",
    "format_message",
    # Enums
    "OutputFormat",
    "SinkCapability",
    # Errors
    "ConfigurationError",
    "InvalidCharacterError",
]
