"""Configuration error definitions."""

from __future__ import annotations

from music_exporter.domain.errors import MusicExporterError


class ConfigError(MusicExporterError):
    """Raised when configuration values are invalid."""


class MissingConfigError(ConfigError):
    """Raised when required configuration values are absent or blank."""
