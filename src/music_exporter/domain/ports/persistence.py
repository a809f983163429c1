"""Persistence port for the exported catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from music_exporter.domain.model import MusicRecord


class CatalogStore(Protocol):
    def read(self) -> list[MusicRecord]:
        """Return the stored catalog, or an empty list when nothing is stored yet."""
        ...

    def write(self, records: Sequence[MusicRecord]) -> None:
        """Replace the stored catalog with ``records``."""
        ...


__all__ = ["CatalogStore"]
