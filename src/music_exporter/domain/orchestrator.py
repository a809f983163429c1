"""Sequence authorization, pagination and merging across platforms."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Any

from .catalog import merge_catalog, sort_catalog
from .pagination import fetch_all_pages

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import MusicRecord
    from .platforms import Platform
    from .ports.fetching import PlatformClient
    from .ports.persistence import CatalogStore

ClientFactory = Callable[["Platform"], "PlatformClient[Any]"]

log = getLogger(__name__)


class RunState(StrEnum):
    IDLE = "idle"
    AUTHORIZING = "authorizing"
    PAGINATING = "paginating"
    MERGING = "merging"
    SORTING = "sorting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of a completed export run."""

    records: list[MusicRecord]
    existing: int
    fetched: int
    duplicates: int


class MergeOrchestrator:
    """Fetch every requested platform in order, then merge into the stored catalog.

    Platforms run strictly one after another. The first error on any platform
    aborts the whole run and nothing is written to the store.
    """

    def __init__(
        self,
        *,
        store: CatalogStore,
        client_factory: ClientFactory,
        remove_duplicates: bool = True,
        sort: bool = True,
    ) -> None:
        self._store = store
        self._client_factory = client_factory
        self._remove_duplicates = remove_duplicates
        self._sort = sort
        self.state = RunState.IDLE
        self.current_platform: Platform | None = None

    async def run(self, platforms: Sequence[Platform]) -> ExportResult:
        try:
            result = await self._run(platforms)
        except BaseException:
            self._transition(RunState.FAILED)
            raise
        self._transition(RunState.DONE)
        return result

    async def _run(self, platforms: Sequence[Platform]) -> ExportResult:
        existing = self._store.read()
        fetched: list[MusicRecord] = []
        for platform in platforms:
            fetched.extend(await self._fetch_platform(platform))
        self.current_platform = None

        self._transition(RunState.MERGING)
        merged = merge_catalog(existing, fetched, remove_duplicates=self._remove_duplicates)
        records, duplicates = merged.records, merged.duplicates

        if self._sort:
            self._transition(RunState.SORTING)
            records = sort_catalog(records)

        log.info(f"Unique items: {len(records)} ({duplicates} duplicates dropped)")
        self._store.write(records)
        return ExportResult(
            records=records,
            existing=len(existing),
            fetched=len(fetched),
            duplicates=duplicates,
        )

    async def _fetch_platform(self, platform: Platform) -> list[MusicRecord]:
        self.current_platform = platform
        log.info(f"Retrieving music of {platform.display_name}")
        async with self._client_factory(platform) as client:
            self._transition(RunState.AUTHORIZING)
            await client.authorize()
            self._transition(RunState.PAGINATING)
            return await fetch_all_pages(client)

    def _transition(self, state: RunState) -> None:
        suffix = f" ({self.current_platform})" if self.current_platform else ""
        log.debug(f"Export state: {self.state} -> {state}{suffix}")
        self.state = state


__all__ = ["ClientFactory", "ExportResult", "MergeOrchestrator", "RunState"]
