from __future__ import annotations

import pytest

from music_exporter.adapters.youtube.schema import PlaylistItem
from music_exporter.adapters.youtube.translator import (
    clean_author,
    clean_title,
    translate_playlist_item,
)
from music_exporter.domain.model import MusicRecord


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("title (audio officiel)", "title"),
        ("title (feat. artist)", "title (feat. artist)"),
        ("title [official video]", "title"),
        ("title [new]", "title [new]"),
        ("Song (OFFICIAL Music Video) [Lyrics]", "Song [Lyrics]"),
        ("Song [Official Audio] (Live)", "Song (Live)"),
        ("(Official Audio) Song", " Song"),
        ("Song (Official", "Song (Official"),
        ("Song) official", "Song) official"),
        ("", ""),
    ],
)
def test_clean_title(title: str, expected: str) -> None:
    assert clean_title(title) == expected


def test_clean_title_only_considers_latest_opener_of_a_kind() -> None:
    assert clean_title("a (official (b) c)") == "a (official (b) c)"


def test_clean_title_removes_every_official_span() -> None:
    assert clean_title("a [official] (official)") == "a"


@pytest.mark.parametrize(
    ("channel", "expected"),
    [
        ("Some Artist - Topic", "Some Artist"),
        ("Some Artist", "Some Artist"),
        ("Topic - Some Artist", "Topic - Some Artist"),
        (None, "Unknown"),
    ],
)
def test_clean_author(channel: str | None, expected: str) -> None:
    assert clean_author(channel) == expected


def test_translate_playlist_item_builds_watch_and_thumbnail_urls() -> None:
    item = PlaylistItem.model_validate(
        {
            "snippet": {
                "title": "Song Title (Official Video)",
                "publishedAt": "2023-11-05T18:22:01Z",
                "videoOwnerChannelTitle": "Some Artist - Topic",
                "resourceId": {"kind": "youtube#video", "videoId": "abc"},
            }
        }
    )

    assert translate_playlist_item(item) == MusicRecord(
        author="Some Artist",
        title="Song Title",
        url="https://www.youtube.com/watch?v=abc",
        thumbnail="https://img.youtube.com/vi/abc/default.jpg",
        date="2023-11-05T18:22:01Z",
        album=None,
    )
