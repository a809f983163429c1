"""Ports for fetching saved tracks from streaming platforms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from types import TracebackType

    from music_exporter.domain.model import Page
    from music_exporter.domain.session import PlatformSession


class PlatformClient[CursorT](Protocol):
    """Capability set shared by every platform variant.

    ``authorize`` must complete before the first ``fetch_page`` call. Cursors are
    opaque to callers: pass ``None`` for the first page and stop once a page comes
    back with ``next_cursor`` set to ``None``.
    """

    @property
    def name(self) -> str: ...

    async def authorize(self) -> PlatformSession: ...

    async def fetch_page(self, cursor: CursorT | None) -> Page[CursorT]: ...

    async def aclose(self) -> None: ...

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


__all__ = ["PlatformClient"]
