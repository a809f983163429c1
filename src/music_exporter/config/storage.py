"""Catalog storage configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class StorageConfig:
    music_file: Path

    def resolve_music_file(self) -> Path:
        return self.music_file.expanduser().resolve()


def get_storage_config(music_file: str | Path) -> StorageConfig:
    return StorageConfig(music_file=Path(music_file))
