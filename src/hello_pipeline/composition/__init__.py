"""Composition root: the only place adapters are chosen.

The CLI receives a zero-argument factory returning :class:`AppServices`;
production code passes :func:`build_production`, tests pass
:func:`build_testing` or assemble their own container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.console.sink import create_output_sink
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.sink import SinkSpy
    from ..application.ports import (
        CreateOutputSink,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    # pyright checks each production adapter against its port here.
    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_create_output_sink: CreateOutputSink = create_output_sink


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI.

    Attributes:
        get_config: Loads layered configuration for a profile.
        get_default_config_path: Locates the bundled defaults file.
        display_config: Renders configuration for the ``config`` command.
        init_logging: Starts the logging runtime from configuration.
        create_output_sink: Returns the sink the greeting is written to.
    """

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    create_output_sink: CreateOutputSink


def build_production() -> AppServices:
    """Wire layered config, lib_log_rich and the stdout sink."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        create_output_sink=create_output_sink,
    )


def build_testing(*, spy: SinkSpy | None = None) -> AppServices:
    """Wire in-memory adapters; the greeting lands in ``spy``.

    Example:
        >>> from hello_pipeline.adapters.memory import SinkSpy
        >>> spy = SinkSpy()
        >>> build_testing(spy=spy).create_output_sink() is spy
        True
    """
    from ..adapters.memory import (
        SinkSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    sink = spy if spy is not None else SinkSpy()
    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        create_output_sink=sink.create,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
