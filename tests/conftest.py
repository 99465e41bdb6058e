"""Shared pytest fixtures for CLI, pipeline and module-entry tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_pipeline.adapters.memory.sink import SinkSpy
    from hello_pipeline.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

GREETING_LINE = "[Strategy]: [Formatted]: Hello, World!"


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture(autouse=True)
def reset_logging_runtime() -> Iterator[None]:
    """Shut the lib_log_rich runtime down after every test.

    Each test then initialises logging from its own configuration and its
    own CliRunner streams.
    """
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def greeting_line() -> str:
    """The exact line the greeting pipeline writes, without terminator."""
    return GREETING_LINE


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for the greeting line; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from hello_pipeline.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a monkeypatched loader loses
    its cache_clear method.
    """
    from hello_pipeline.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class GreetingCliContext:
    """Services factory plus the sink spy it writes to.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: SinkSpy receiving every line the pipeline emits.
    """

    factory: Callable[[], Any]
    spy: SinkSpy


@pytest.fixture
def greeting_cli_context(clear_config_cache: None) -> Callable[..., GreetingCliContext]:
    """Create CLI services whose output sink is a SinkSpy.

    Configuration and logging stay production-wired; only the stdout
    boundary is replaced. Keyword arguments are forwarded to ``SinkSpy``.

    Example:
        def test_plain_sink(cli_runner, greeting_cli_context) -> None:
            ctx = greeting_cli_context(capability=SinkCapability.PLAIN)
            cli_runner.invoke(cli, ["hello"], obj=ctx.factory)
            assert ctx.spy.calls == ["print"]
    """
    from hello_pipeline.adapters.memory.sink import SinkSpy as SinkSpyImpl
    from hello_pipeline.composition import AppServices, build_production

    def _create(**spy_kwargs: Any) -> GreetingCliContext:
        spy = SinkSpyImpl(**spy_kwargs)
        prod = build_production()
        test_services = AppServices(
            get_config=prod.get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_output_sink=spy.create,
        )
        return GreetingCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory whose get_config returns the given data.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """
    from hello_pipeline.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_output_sink=prod.create_output_sink,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def profile_capturing_factory(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from hello_pipeline.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_output_sink=prod.create_output_sink,
        )
        return lambda: test_services

    return _inject
