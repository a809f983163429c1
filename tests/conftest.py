from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from music_exporter.domain.model import MusicRecord
from tests.support.fakes import MemoryCatalogStore

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def clean_exporter_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("MUSIC_EXPORTER_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def memory_store() -> MemoryCatalogStore:
    return MemoryCatalogStore()


@pytest.fixture
def song_band() -> MusicRecord:
    return MusicRecord(author="Band", title="Song")
