"""Translate YouTube playlist items into catalog records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from music_exporter.domain.model import MusicRecord

if TYPE_CHECKING:
    from .schema import PlaylistItem

UNKNOWN_AUTHOR: Final[str] = "Unknown"
TOPIC_SUFFIX: Final[str] = " - Topic"
OFFICIAL_MARKER: Final[str] = "offic"

_BRACKETS: Final[dict[str, str]] = {")": "(", "]": "["}


def clean_title(title: str) -> str:
    """Drop ``(...)``/``[...]`` spans that mention an official release.

    One opener position is tracked per bracket kind and a later opener of the
    same kind replaces the earlier one, so ``"a (b (c) d)"`` only ever considers
    ``"(c)"``. A matching span is removed together with one preceding space.
    """

    openers: dict[str, int | None] = {"(": None, "[": None}
    keep = [True] * len(title)
    for index, char in enumerate(title):
        if char in openers:
            openers[char] = index
            continue
        kind = _BRACKETS.get(char)
        if kind is None:
            continue
        start = openers[kind]
        if start is None:
            continue
        openers[kind] = None
        if OFFICIAL_MARKER not in title[start : index + 1].lower():
            continue
        if start > 0 and title[start - 1] == " ":
            start -= 1
        keep[start : index + 1] = [False] * (index + 1 - start)
    return "".join(char for char, kept in zip(title, keep, strict=True) if kept)


def clean_author(channel_title: str | None) -> str:
    """Map the video owner's channel to an author, dropping auto-generated "Topic" suffixes."""

    if channel_title is None:
        return UNKNOWN_AUTHOR
    return channel_title.removesuffix(TOPIC_SUFFIX)


def translate_playlist_item(item: PlaylistItem) -> MusicRecord:
    snippet = item.snippet
    video_id = snippet.resource_id.video_id
    return MusicRecord(
        author=clean_author(snippet.video_owner_channel_title),
        title=clean_title(snippet.title),
        url=f"https://www.youtube.com/watch?v={video_id}",
        thumbnail=f"https://img.youtube.com/vi/{video_id}/default.jpg",
        date=snippet.published_at,
        album=None,
    )
