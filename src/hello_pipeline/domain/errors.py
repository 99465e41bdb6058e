"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Example:
        >>> from hello_pipeline.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[lib_log_rich] must be a table")
        >>> str(err)
        '[lib_log_rich] must be a table'
    """


class InvalidCharacterError(ValueError):
    """A character source was given something other than one code point.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still catch it.

    Example:
        >>> from hello_pipeline.domain.errors import InvalidCharacterError
        >>> isinstance(InvalidCharacterError("empty"), ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidCharacterError",
]
