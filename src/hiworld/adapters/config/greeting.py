"""Typed view of the ``[greeting]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hiworld.domain.behaviors import DEFAULT_NAME
from hiworld.domain.enums import OutputSink


class GreetingSettings(BaseModel):
    """Pydantic model for [greeting] config section validation.

    Example:
        >>> GreetingSettings().sink
        <OutputSink.STDOUT: 'stdout'>
        >>> GreetingSettings.model_validate({"sink": "log"}).sink is OutputSink.LOG
        True
    """

    sink: OutputSink = OutputSink.STDOUT
    default_name: str = DEFAULT_NAME

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_greeting_settings(config: Config) -> GreetingSettings:
    """Parse the ``[greeting]`` section of ``config``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Validated settings; a missing section yields the defaults.

    Raises:
        ValueError: If the section holds an unknown key or an invalid value.
    """
    raw: object = config.get("greeting", default={})
    try:
        return GreetingSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ValueError(f"Invalid greeting configuration: {details}") from exc


__all__ = [
    "GreetingSettings",
    "load_greeting_settings",
]
