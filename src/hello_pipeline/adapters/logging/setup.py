"""Centralized lib_log_rich initialization for all entry points.

Contents:
    * :class:`LoggingConfigModel` - boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialization.

System Role:
    Lives in the adapters layer. Console scripts, ``python -m`` and the CLI
    tests all reach the runtime through :func:`init_logging`, so the bridge
    from standard ``logging`` is attached exactly once per process.
"""

from __future__ import annotations

from collections.abc import Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hello_pipeline import __init__conf__
from hello_pipeline.domain.errors import ConfigurationError


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown keys are kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name when not configured.

    Raises:
        ConfigurationError: If the section is not a table or fails validation.
    """
    section: object = config.get("lib_log_rich", default={})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[lib_log_rich] must be a table, got {type(section).__name__}")
    try:
        parsed = LoggingConfigModel.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [lib_log_rich] section: {exc}") from exc

    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once and bridge standard logging into it.

    Loads .env files on the first call so ``LOG_*`` variables take part, then
    starts the runtime from the ``[lib_log_rich]`` section. Later calls return
    immediately.

    Args:
        config: Loaded layered configuration.

    Raises:
        ConfigurationError: If the ``[lib_log_rich]`` section is unusable.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
