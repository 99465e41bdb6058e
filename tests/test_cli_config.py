"""CLI config stories: display formats, sections, profiles and overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from hello_pipeline.adapters import cli as cli_mod
from hello_pipeline.adapters.cli.exit_codes import ExitCode

LOGGING_SECTION: dict[str, Any] = {"lib_log_rich": {"environment": "test", "console_level": "WARNING"}}


@pytest.mark.os_agnostic
def test_config_shows_bundled_logging_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The bundled defaults carry the [lib_log_rich] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "lib_log_rich"], obj=production_factory)

    assert result.exit_code == 0
    assert "console_level" in result.stdout


@pytest.mark.os_agnostic
def test_config_json_format_lists_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """--format json writes the sections as JSON."""
    factory = config_cli_context(LOGGING_SECTION)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert '"lib_log_rich"' in result.stdout
    assert '"environment": "test"' in result.stdout


@pytest.mark.os_agnostic
def test_config_human_format_shows_section_header(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Human output renders TOML-like section headers."""
    factory = config_cli_context(LOGGING_SECTION)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "[lib_log_rich]" in result.stdout
    assert "[Strategy]:" not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_config_unknown_section_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    output_format: str,
) -> None:
    """A missing section is reported on stderr with exit code 22."""
    factory = config_cli_context(LOGGING_SECTION)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["config", "--format", output_format, "--section", "greeting"],
        obj=factory,
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_config_rejects_unknown_format(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Only human and json are accepted."""
    factory = config_cli_context(LOGGING_SECTION)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "yaml"], obj=factory)

    assert result.exit_code == ExitCode.USAGE_ERROR


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["config"], [None]),
        (["--profile", "staging", "config"], ["staging"]),
        (["config", "--profile", "staging"], [None, "staging"]),
    ],
)
def test_config_passes_profiles_to_the_loader(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    profile_capturing_factory: Callable[[Config, list[str | None]], Callable[[], Any]],
    argv: list[str],
    expected: list[str | None],
) -> None:
    """Root and subcommand profiles each reach get_config."""
    captured: list[str | None] = []
    factory = profile_capturing_factory(config_factory(LOGGING_SECTION), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, argv, obj=factory)

    assert result.exit_code == 0
    assert captured == expected


@pytest.mark.os_agnostic
def test_subcommand_profile_reload_keeps_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    profile_capturing_factory: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """Root --set values are reapplied after config --profile reloads."""
    captured: list[str | None] = []
    factory = profile_capturing_factory(config_factory(LOGGING_SECTION), captured)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.environment=overridden", "config", "--profile", "staging", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert '"environment": "overridden"' in result.stdout


@pytest.mark.os_agnostic
def test_config_without_subcommand_profile_shows_overridden_config(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Without a subcommand profile the stored, overridden config is shown."""
    factory = config_cli_context(LOGGING_SECTION)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.environment=overridden", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert '"test"' not in result.stdout
    assert "overridden" in result.stdout


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Profile names with path separators are rejected."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../escape", "config"], obj=production_factory)

    assert result.exit_code == ExitCode.USAGE_ERROR
