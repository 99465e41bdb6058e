"""Character sources and the fixed greeting sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import InvalidCharacterError


@dataclass(frozen=True, slots=True)
class CharacterSource:
    """Hold exactly one Unicode code point and hand it out on request.

    Attributes:
        value: The single character this source provides.

    Raises:
        InvalidCharacterError: If ``value`` is not exactly one code point.

    Example:
        >>> CharacterSource("H").get_character()
        'H'
        >>> CharacterSource("ab")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidCharacterError: expected exactly one character, got 'ab'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise InvalidCharacterError(f"expected exactly one character, got {self.value!r}")

    def get_character(self) -> str:
        return self.value


def characters_of(text: str) -> tuple[CharacterSource, ...]:
    """Split ``text`` into one :class:`CharacterSource` per code point.

    Example:
        >>> [source.value for source in characters_of("Hi!")]
        ['H', 'i', '!']
    """
    return tuple(CharacterSource(char) for char in text)


GREETING_SEQUENCE: Final[tuple[CharacterSource, ...]] = (
    CharacterSource("H"),
    CharacterSource("e"),
    CharacterSource("l"),
    CharacterSource("l"),
    CharacterSource("o"),
    CharacterSource(","),
    CharacterSource(" "),
    CharacterSource("W"),
    CharacterSource("o"),
    CharacterSource("r"),
    CharacterSource("l"),
    CharacterSource("d"),
    CharacterSource("!"),
)


__all__ = [
    "GREETING_SEQUENCE",
    "CharacterSource",
    "characters_of",
]
