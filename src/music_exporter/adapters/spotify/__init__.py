"""Spotify adapter package."""

from __future__ import annotations

from .client import SpotifyClient
from .schema import SavedTrackItem, SavedTracksPage, SpotifyAlbum, SpotifyArtist, SpotifyTrack
from .translator import translate_saved_track

__all__ = [
    "SavedTrackItem",
    "SavedTracksPage",
    "SpotifyAlbum",
    "SpotifyArtist",
    "SpotifyClient",
    "SpotifyTrack",
    "translate_saved_track",
]
