"""Centralized logging initialization for all entry points.

Every entry point (console script, ``python -m``, tests using the production
services) configures lib_log_rich through :func:`init_logging`, so the
runtime is set up exactly once per process.

Contents:
    * :class:`LoggingConfigModel` – validated ``[lib_log_rich]`` section.
    * :func:`init_logging` – idempotent logging initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hiworld import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through untouched to lib_log_rich.RuntimeConfig.

    Example:
        >>> parsed = LoggingConfigModel.model_validate({"console_level": "DEBUG"})
        >>> parsed.service is None, parsed.environment
        (True, 'prod')
        >>> parsed.model_dump(exclude={"service", "environment"})
        {'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name defaults to the distribution name when not configured,
    so greetings sent to the ``log`` sink are tagged ``hiworld``.

    Example:
        >>> from lib_layered_config import Config
        >>> runtime = _build_runtime_config(Config({"lib_log_rich": {"environment": "test"}}, {}))
        >>> runtime.service, runtime.environment
        ('hiworld', 'test')
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Loads .env files so ``LOG_*`` variables apply, initialises the runtime
    from the ``[lib_log_rich]`` section and bridges stdlib ``logging`` into it.
    Later calls return immediately while the runtime is initialised.

    Args:
        config: Already-loaded layered configuration object.
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
