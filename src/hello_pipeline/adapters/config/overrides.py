"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or any path
            component is empty.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='DEBUG')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").value
        8192
    """
    path_part, separator, value_str = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key_str = path_part.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key_str.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Parse ``raw`` as JSON, falling back to the string itself.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge CLI overrides into a Config instance.

    Returns:
        New Config with overrides applied, or ``config`` itself when
        ``raw_overrides`` is empty.

    Raises:
        ValueError: If any override string is malformed or collides with a
            scalar written by an earlier override.

    Examples:
        >>> cfg = Config({"s": {"k": 1}}, {})
        >>> apply_overrides(cfg, ("s.k=2",))["s"]["k"]
        2
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        try:
            _nest_override(overrides, parse_override(raw))
        except TypeError as exc:
            raise ValueError(f"Invalid override {raw!r}: {exc}") from exc

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
