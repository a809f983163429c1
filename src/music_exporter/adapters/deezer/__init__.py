"""Deezer adapter package."""

from __future__ import annotations

from .client import DeezerClient, parse_next_index
from .schema import DeezerTrack, DeezerTracksPage
from .translator import translate_track

__all__ = [
    "DeezerClient",
    "DeezerTrack",
    "DeezerTracksPage",
    "parse_next_index",
    "translate_track",
]
