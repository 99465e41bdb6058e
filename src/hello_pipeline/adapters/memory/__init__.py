"""Port implementations that stay in memory.

The composition root wires these in :func:`hello_pipeline.composition.build_testing`:
configuration is empty, logging is not started and the greeting line lands
in a :class:`SinkSpy` instead of on stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .sink import SinkSpy

# Static conformance assertions
if TYPE_CHECKING:
    from hello_pipeline.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        OutputSink,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_sink: OutputSink = SinkSpy()

__all__ = [
    "SinkSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
