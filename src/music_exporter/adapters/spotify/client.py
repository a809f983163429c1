"""OAuth2 client for the Spotify saved-tracks listing.

Useful link https://developer.spotify.com/documentation/web-api
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from music_exporter.adapters.http import HttpClient, HttpConfig
from music_exporter.adapters.oauth import (
    browser_code_provider,
    build_authorize_url,
    exchange_code,
)
from music_exporter.domain.errors import AuthorizationError
from music_exporter.domain.model import Page
from music_exporter.domain.session import BearerSession

from .schema import SavedTracksPage
from .translator import translate_saved_track

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from music_exporter.adapters.oauth import CodeProvider
    from music_exporter.config.platforms import SpotifyConfig

log = getLogger(__name__)

SPOTIFY_AUTHORIZE_URL: Final[str] = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL: Final[str] = "https://accounts.spotify.com/api/token"
SPOTIFY_SAVED_TRACKS_URL: Final[str] = "https://api.spotify.com/v1/me/tracks"
PAGE_SIZE: Final[int] = 50  # API maximum


class SpotifyClient:
    """Authorization-code flow with the client credentials sent as HTTP Basic auth."""

    name = "Spotify"

    def __init__(
        self,
        *,
        config: SpotifyConfig,
        code_provider: CodeProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._code_provider = code_provider or browser_code_provider(config.callback)
        self._http = HttpClient(HttpConfig(name=self.name), transport=transport)
        self._session: BearerSession | None = None

    @property
    def authorize_url(self) -> str:
        return build_authorize_url(
            SPOTIFY_AUTHORIZE_URL,
            client_id=self._config.client_id,
            redirect_uri=self._config.callback.redirect_uri,
            scope=self._config.scope,
        )

    async def authorize(self) -> BearerSession:
        code = await self._code_provider(self.authorize_url)
        access_token = await exchange_code(
            self._http,
            SPOTIFY_TOKEN_URL,
            code=code.value,
            redirect_uri=self._config.callback.redirect_uri,
            client_id=self._config.client_id,
            client_secret=self._config.client_secret,
            basic_auth=True,
        )
        self._session = BearerSession(access_token=access_token)
        return self._session

    async def fetch_page(self, cursor: int | None) -> Page[int]:
        session = self._require_session()
        offset = cursor or 0
        payload = await self._http.get_model(
            SPOTIFY_SAVED_TRACKS_URL,
            SavedTracksPage,
            params={"limit": PAGE_SIZE, "offset": offset},
            headers=session.headers(),
            what="saved tracks",
        )
        items = tuple(
            translate_saved_track(item.track) for item in payload.items if item.track is not None
        )
        next_offset = payload.offset + PAGE_SIZE if payload.next is not None else None
        log.info(f"Next offset: {next_offset}")
        return Page(items=items, next_cursor=next_offset)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> SpotifyClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _require_session(self) -> BearerSession:
        if self._session is None:
            raise AuthorizationError("Spotify: not authorized")
        return self._session
