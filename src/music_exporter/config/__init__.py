"""Application configuration helpers."""

from __future__ import annotations

from .env import ENV_PREFIX, env_name, optional_env_var, require_env_vars
from .errors import ConfigError, MissingConfigError
from .logging import configure_logging
from .platforms import (
    DEFAULT_CALLBACK_PORT,
    CallbackConfig,
    DeezerConfig,
    SpotifyConfig,
    YoutubeConfig,
    get_callback_config,
    get_deezer_config,
    get_spotify_config,
    get_youtube_config,
)
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_CALLBACK_PORT",
    "ENV_PREFIX",
    "CallbackConfig",
    "ConfigError",
    "DeezerConfig",
    "MissingConfigError",
    "SpotifyConfig",
    "StorageConfig",
    "YoutubeConfig",
    "configure_logging",
    "env_name",
    "get_callback_config",
    "get_deezer_config",
    "get_spotify_config",
    "get_storage_config",
    "get_youtube_config",
    "optional_env_var",
    "require_env_vars",
]
