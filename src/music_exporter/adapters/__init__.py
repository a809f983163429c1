"""Adapters to streaming platforms and storage."""

from __future__ import annotations

from .deezer import DeezerClient
from .json_store import JsonCatalogStore
from .spotify import SpotifyClient
from .youtube import YoutubeClient

type AnyPlatformClient = DeezerClient | SpotifyClient | YoutubeClient

__all__ = [
    "AnyPlatformClient",
    "DeezerClient",
    "JsonCatalogStore",
    "SpotifyClient",
    "YoutubeClient",
]
