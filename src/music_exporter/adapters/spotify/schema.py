"""Minimal Pydantic models for the Spotify Web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyArtist(SpotifyBaseModel):
    name: str


class SpotifyImage(SpotifyBaseModel):
    url: str


class SpotifyAlbum(SpotifyBaseModel):
    name: str
    release_date: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])


class SpotifyExternalUrls(SpotifyBaseModel):
    spotify: str | None = None


class SpotifyTrack(SpotifyBaseModel):
    name: str
    album: SpotifyAlbum
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])
    external_urls: SpotifyExternalUrls = Field(default_factory=SpotifyExternalUrls)


class SavedTrackItem(SpotifyBaseModel):
    track: SpotifyTrack | None = None


class SavedTracksPage(SpotifyBaseModel):
    """One page of ``/me/tracks``; ``next`` is null on the last page."""

    next: str | None = None
    offset: int = 0
    total: int | None = None
    items: list[SavedTrackItem] = Field(default_factory=list["SavedTrackItem"])
