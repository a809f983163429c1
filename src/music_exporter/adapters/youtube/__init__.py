"""YouTube adapter package."""

from __future__ import annotations

from .client import YoutubeClient
from .schema import ChannelsResponse, PlaylistItem, PlaylistItemsPage
from .translator import clean_author, clean_title, translate_playlist_item

__all__ = [
    "ChannelsResponse",
    "PlaylistItem",
    "PlaylistItemsPage",
    "YoutubeClient",
    "clean_author",
    "clean_title",
    "translate_playlist_item",
]
