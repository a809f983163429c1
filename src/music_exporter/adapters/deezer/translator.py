"""Translate Deezer payloads into catalog records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from music_exporter.domain.model import MusicRecord

if TYPE_CHECKING:
    from .schema import DeezerTrack


def translate_track(track: DeezerTrack) -> MusicRecord:
    return MusicRecord(
        author=track.artist.name,
        title=track.title,
        url=track.link,
        thumbnail=track.album.cover,
        date=None,
        album=track.album.title,
    )
