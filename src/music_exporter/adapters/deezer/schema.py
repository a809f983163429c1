"""Minimal Pydantic models for the Deezer API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeezerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class DeezerArtist(DeezerBaseModel):
    name: str


class DeezerAlbum(DeezerBaseModel):
    title: str
    cover: str | None = None


class DeezerTrack(DeezerBaseModel):
    title: str
    link: str | None = None
    album: DeezerAlbum
    artist: DeezerArtist


class DeezerError(DeezerBaseModel):
    type: str | None = None
    message: str | None = None
    code: int | None = None


class DeezerTracksPage(DeezerBaseModel):
    """One page of ``/user/{id}/tracks``; Deezer reports failures as an ``error`` body."""

    data: list[DeezerTrack] = Field(default_factory=list["DeezerTrack"])
    next: str | None = None
    total: int | None = None
    error: DeezerError | None = None
