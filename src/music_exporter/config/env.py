"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from .errors import ConfigError, MissingConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

ENV_PREFIX: Final[str] = "MUSIC_EXPORTER_"

Prompt = Callable[[str], str]


def env_name(suffix: str) -> str:
    """Return the fully-qualified environment variable name for ``suffix``."""

    return f"{ENV_PREFIX}{suffix}"


def require_env_vars(
    names: Sequence[str],
    *,
    prompt: Prompt | None = None,
) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank.

    When ``prompt`` is given, missing values are asked for interactively before
    giving up; a blank answer still counts as missing.
    """

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if (value is None or not value.strip()) and prompt is not None:
            value = prompt(f"Please enter {name} ({name} not found in the env): ")
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value.strip()

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigError(f"Missing configuration for: {missing_list}")

    return values


def optional_env_var(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def int_env_var(name: str, *, default: int) -> int:
    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}", cause=exc) from exc
