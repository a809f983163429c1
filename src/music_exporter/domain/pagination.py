"""Drive a platform client through every page of its listing."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import MusicRecord
    from .ports.fetching import PlatformClient

log = getLogger(__name__)


async def fetch_all_pages[CursorT](client: PlatformClient[CursorT]) -> list[MusicRecord]:
    """Fetch pages sequentially until the platform reports no further cursor."""

    items: list[MusicRecord] = []
    cursor: CursorT | None = None
    pages = 0
    while True:
        page = await client.fetch_page(cursor)
        pages += 1
        items.extend(page.items)
        log.debug(
            f"{client.name}: page {pages} -> {len(page.items)} items, next={page.next_cursor!r}"
        )
        if page.next_cursor is None:
            break
        cursor = page.next_cursor
    log.info(f"{client.name}: fetched {len(items)} items in {pages} page(s)")
    return items
