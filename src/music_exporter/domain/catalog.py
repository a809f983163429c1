"""Deduplication and ordering of the merged catalog."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import MusicRecord

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DedupResult:
    records: list[MusicRecord]
    duplicates: int


def deduplicate(records: Iterable[MusicRecord]) -> DedupResult:
    """Keep the first record seen for every normalization key, in input order."""

    seen: set[tuple[str, str]] = set()
    unique: list[MusicRecord] = []
    duplicates = 0
    for record in records:
        key = record.normalization_key
        if key in seen:
            duplicates += 1
            log.info(f"Duplicate: {record.title} by {record.author}")
            continue
        seen.add(key)
        unique.append(record)
    return DedupResult(records=unique, duplicates=duplicates)


def sort_catalog(records: Iterable[MusicRecord]) -> list[MusicRecord]:
    """Order records by author, title, then the optional fields (absent first)."""

    return sorted(records, key=lambda record: record.sort_key())


def merge_catalog(
    existing: Iterable[MusicRecord],
    *batches: Iterable[MusicRecord],
    remove_duplicates: bool = True,
) -> DedupResult:
    """Concatenate ``existing`` and each fetched batch in order.

    Duplicates are dropped (first seen wins) unless ``remove_duplicates`` is off.
    The result keeps first-seen order; ordering is ``sort_catalog``'s job.
    """

    combined: list[MusicRecord] = list(existing)
    for batch in batches:
        combined.extend(batch)
    log.info(f"Total items: {len(combined)}")
    if not remove_duplicates:
        return DedupResult(records=combined, duplicates=0)
    return deduplicate(combined)


__all__ = ["DedupResult", "deduplicate", "merge_catalog", "sort_catalog"]
