"""Translate Spotify payloads into catalog records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from music_exporter.domain.model import MusicRecord

if TYPE_CHECKING:
    from .schema import SpotifyTrack

UNKNOWN_AUTHOR = "Unknown"


def translate_saved_track(track: SpotifyTrack) -> MusicRecord:
    album = track.album
    return MusicRecord(
        author=track.artists[0].name if track.artists else UNKNOWN_AUTHOR,
        title=track.name,
        url=track.external_urls.spotify,
        thumbnail=album.images[0].url if album.images else None,
        date=album.release_date,
        album=album.name,
    )
