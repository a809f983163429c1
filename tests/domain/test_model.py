from __future__ import annotations

import pytest

from music_exporter.domain.model import MusicRecord, Page, normalize_record, normalize_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Song", "song"),
        ("  Song  ", "song"),
        ("\tBAND\n", "band"),
        ("", ""),
    ],
)
def test_normalize_text(raw: str, expected: str) -> None:
    assert normalize_text(raw) == expected


def test_normalize_record_trims_and_lowercases_identity_only() -> None:
    record = MusicRecord(
        author=" The BAND ",
        title="My Song  ",
        url="https://example.com/Track",
        album="Some Album",
    )

    normalized = normalize_record(record)

    assert normalized.author == "the band"
    assert normalized.title == "my song"
    assert normalized.url == "https://example.com/Track"
    assert normalized.album == "Some Album"


def test_normalize_record_is_idempotent() -> None:
    record = MusicRecord(author="  Artist ", title=" TITLE")

    once = normalize_record(record)

    assert normalize_record(once) == once


def test_normalization_key_ignores_case_and_surrounding_whitespace() -> None:
    left = MusicRecord(author="Band", title="Song")
    right = MusicRecord(author="BAND ", title=" song", url="https://example.com")

    assert left.normalization_key == right.normalization_key == ("song", "band")


def test_records_are_immutable() -> None:
    record = MusicRecord(author="Band", title="Song")

    with pytest.raises(AttributeError):
        record.title = "Other"  # type: ignore[misc]


def test_sort_key_orders_absent_optional_fields_first() -> None:
    bare = MusicRecord(author="A", title="T")
    with_url = MusicRecord(author="A", title="T", url="https://a")
    with_date = MusicRecord(author="A", title="T", date="2020-01-01")

    ordered = sorted([with_url, with_date, bare], key=MusicRecord.sort_key)

    assert ordered == [bare, with_date, with_url]


def test_sort_key_is_case_sensitive_on_author() -> None:
    upper = MusicRecord(author="Zed", title="x")
    lower = MusicRecord(author="abba", title="x")

    assert sorted([lower, upper], key=MusicRecord.sort_key) == [upper, lower]


def test_page_defaults_to_last_page() -> None:
    page: Page[int] = Page(items=())

    assert page.next_cursor is None
