"""The closed set of supported streaming platforms."""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    DEEZER = "deezer"
    SPOTIFY = "spotify"
    YOUTUBE = "youtube"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()
