"""Core value types of the exporter."""

from __future__ import annotations

from dataclasses import dataclass, replace

type OptionalKey = tuple[bool, str]
type SortKey = tuple[str, str, OptionalKey, OptionalKey, OptionalKey, OptionalKey]


def normalize_text(value: str) -> str:
    return value.strip().lower()


def _optional_key(value: str | None) -> OptionalKey:
    # absent values order before present ones
    return (value is not None, value or "")


@dataclass(frozen=True, slots=True)
class MusicRecord:
    """A single saved track as exported to the catalog."""

    author: str
    title: str
    url: str | None = None
    thumbnail: str | None = None
    date: str | None = None
    album: str | None = None

    @property
    def normalization_key(self) -> tuple[str, str]:
        """Case- and whitespace-insensitive ``(title, author)`` identity."""

        return (normalize_text(self.title), normalize_text(self.author))

    def sort_key(self) -> SortKey:
        return (
            self.author,
            self.title,
            _optional_key(self.url),
            _optional_key(self.thumbnail),
            _optional_key(self.date),
            _optional_key(self.album),
        )


def normalize_record(record: MusicRecord) -> MusicRecord:
    """Return a copy with trimmed, lower-cased title and author."""

    return replace(
        record,
        title=normalize_text(record.title),
        author=normalize_text(record.author),
    )


@dataclass(frozen=True, slots=True)
class Page[CursorT]:
    """One batch of records plus the cursor of the following batch, if any."""

    items: tuple[MusicRecord, ...]
    next_cursor: CursorT | None = None


__all__ = ["MusicRecord", "Page", "normalize_record", "normalize_text"]
