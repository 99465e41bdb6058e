"""Pure domain functions with no I/O or framework dependencies.

Contents:
    * :class:`TextAssembler` - concatenates character sources in order.
    * :class:`MessageFormatter` / :func:`format_message` - applies the
      ``[Formatted]: `` label.
    * :func:`build_greeting` - assembles the canonical greeting.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .characters import GREETING_SEQUENCE, CharacterSource

CANONICAL_GREETING: Final[str] = "Hello, World!"

#: Label prepended by the message formatter.
FORMATTED_LABEL: Final[str] = "[Formatted]: "

#: Label prepended by the output sink in labeled mode.
STRATEGY_LABEL: Final[str] = "[Strategy]: "


class TextAssembler:
    """Assemble text from an ordered, fixed sequence of character sources.

    The sequence is captured as a tuple at construction and never changes,
    so :meth:`get_text` is deterministic and free of side effects.

    Example:
        >>> TextAssembler().get_text()
        'Hello, World!'
        >>> from hello_pipeline.domain.characters import characters_of
        >>> TextAssembler(characters_of("abc")).get_text()
        'abc'
    """

    __slots__ = ("_sources",)

    def __init__(self, sources: Sequence[CharacterSource] = GREETING_SEQUENCE) -> None:
        self._sources: tuple[CharacterSource, ...] = tuple(sources)

    @property
    def sources(self) -> tuple[CharacterSource, ...]:
        return self._sources

    def get_text(self) -> str:
        return "".join(source.get_character() for source in self._sources)


def format_message(message: str) -> str:
    """Return ``message`` prefixed with :data:`FORMATTED_LABEL`.

    The input is never altered; an existing label is not stripped.

    Example:
        >>> format_message("Hello, World!")
        '[Formatted]: Hello, World!'
        >>> format_message("")
        '[Formatted]: '
    """
    return FORMATTED_LABEL + message


class MessageFormatter:
    """Object form of :func:`format_message` for the processor's formatter port."""

    __slots__ = ()

    def format_message(self, message: str) -> str:
        return format_message(message)


def build_greeting() -> str:
    """Return the canonical greeting assembled from its character sources.

    Example:
        >>> build_greeting()
        'Hello, World!'
    """
    return TextAssembler().get_text()


__all__ = [
    "CANONICAL_GREETING",
    "FORMATTED_LABEL",
    "STRATEGY_LABEL",
    "MessageFormatter",
    "TextAssembler",
    "build_greeting",
    "format_message",
]
