"""Cookie-authenticated client for the Deezer favourites listing.

Useful link https://developers.deezer.com/api
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx

from music_exporter.adapters.http import HttpClient, HttpConfig
from music_exporter.config.errors import MissingConfigError
from music_exporter.domain.errors import AuthorizationError, ParseError, TransportError
from music_exporter.domain.model import Page
from music_exporter.domain.session import CookieSession

from .schema import DeezerTracksPage
from .translator import translate_track

if TYPE_CHECKING:
    from types import TracebackType

    from music_exporter.config.platforms import DeezerConfig

log = getLogger(__name__)

DEEZER_API_URL: Final[str] = "https://api.deezer.com"
PAGE_SIZE: Final[int] = 50  # API maximum


def parse_next_index(next_url: str) -> int:
    """Extract the ``index`` offset Deezer embeds in its ``next`` page URL."""

    try:
        raw = httpx.URL(next_url).params.get("index")
    except httpx.InvalidURL as exc:
        raise ParseError(f"Deezer: invalid next page url {next_url!r}", cause=exc) from exc
    if raw is None:
        raise ParseError(f"Deezer: next page url without index: {next_url!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise ParseError(f"Deezer: invalid next page index {raw!r}", cause=exc) from exc


class DeezerClient:
    """Fetch the user's favourite tracks with a browser cookie; no OAuth involved."""

    name = "Deezer"

    def __init__(
        self,
        *,
        config: DeezerConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._http = HttpClient(
            HttpConfig(name=self.name, base_url=DEEZER_API_URL),
            transport=transport,
        )
        self._session: CookieSession | None = None

    async def authorize(self) -> CookieSession:
        missing = [
            label
            for label, value in (("cookie", self._config.cookie), ("user id", self._config.user_id))
            if not value.strip()
        ]
        if missing:
            raise MissingConfigError(f"Deezer: missing {', '.join(missing)}")
        self._session = CookieSession(cookie=self._config.cookie, user_id=self._config.user_id)
        return self._session

    async def fetch_page(self, cursor: int | None) -> Page[int]:
        session = self._require_session()
        payload = await self._http.get_model(
            f"/user/{session.user_id}/tracks",
            DeezerTracksPage,
            params={"index": cursor or 0, "limit": PAGE_SIZE},
            headers=session.headers(),
            what="favourite tracks",
        )
        if payload.error is not None:
            raise TransportError(
                f"Deezer API error: {payload.error.message or payload.error.type or 'unknown'}",
                status_code=payload.error.code,
            )

        items = tuple(translate_track(track) for track in payload.data)
        next_index = parse_next_index(payload.next) if payload.next else None
        log.info(f"Next offset: {next_index}")
        return Page(items=items, next_cursor=next_index)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> DeezerClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _require_session(self) -> CookieSession:
        if self._session is None:
            raise AuthorizationError("Deezer: not authorized")
        return self._session
