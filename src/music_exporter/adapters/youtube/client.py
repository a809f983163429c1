"""OAuth2 + API key client for the YouTube liked-videos playlist.

Useful link https://developers.google.com/youtube/v3/docs/playlistItems#resource
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
from music_exporter.domain.errors import AuthorizationError, ParseError
from music_exporter.domain.model import Page
from music_exporter.domain.session import ApiKeySession

from .schema import ChannelsResponse, PlaylistItemsPage
from .translator import translate_playlist_item

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from music_exporter.adapters.oauth import CodeProvider
    from music_exporter.config.platforms import YoutubeConfig

log = getLogger(__name__)

GOOGLE_AUTHORIZE_URL: Final[str] = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL: Final[str] = "https://oauth2.googleapis.com/token"
YOUTUBE_API_URL: Final[str] = "https://youtube.googleapis.com/youtube/v3"
PAGE_SIZE: Final[int] = 50  # API maximum


class YoutubeClient:
    """Bearer token from the authorization-code flow plus a separate API key.

    Without an explicit playlist id the channel's "likes" playlist is looked up
    once, right before the first page.
    """

    name = "Youtube"

    def __init__(
        self,
        *,
        config: YoutubeConfig,
        code_provider: CodeProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._code_provider = code_provider or browser_code_provider(config.callback)
        self._http = HttpClient(
            HttpConfig(name=self.name, base_url=YOUTUBE_API_URL),
            transport=transport,
        )
        self._session: ApiKeySession | None = None
        self._playlist_id: str | None = config.playlist_id

    @property
    def authorize_url(self) -> str:
        return build_authorize_url(
            GOOGLE_AUTHORIZE_URL,
            client_id=self._config.client_id,
            redirect_uri=self._config.callback.redirect_uri,
            scope=self._config.scope,
        )

    @property
    def playlist_id(self) -> str | None:
        return self._playlist_id

    async def authorize(self) -> ApiKeySession:
        code = await self._code_provider(self.authorize_url)
        access_token = await exchange_code(
            self._http,
            GOOGLE_TOKEN_URL,
            code=code.value,
            redirect_uri=self._config.callback.redirect_uri,
            client_id=self._config.client_id,
            client_secret=self._config.client_secret,
            basic_auth=False,
        )
        self._session = ApiKeySession(access_token=access_token, api_key=self._config.api_key)
        return self._session

    async def fetch_page(self, cursor: str | None) -> Page[str]:
        session = self._require_session()
        if self._playlist_id is None:
            self._playlist_id = await self._resolve_liked_playlist_id(session)
            log.info(f"Liked playlist id: {self._playlist_id}")

        params = {
            "part": "snippet,contentDetails",
            "maxResults": PAGE_SIZE,
            "playlistId": self._playlist_id,
            "key": session.api_key,
        }
        if cursor is not None:
            params["pageToken"] = cursor
        payload = await self._http.get_model(
            "/playlistItems",
            PlaylistItemsPage,
            params=params,
            headers=session.headers(),
            what="playlist items",
        )
        items = tuple(translate_playlist_item(item) for item in payload.items)
        log.info(f"Next page token: {payload.next_page_token}")
        return Page(items=items, next_cursor=payload.next_page_token or None)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> YoutubeClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _resolve_liked_playlist_id(self, session: ApiKeySession) -> str:
        payload = await self._http.get_model(
            "/channels",
            ChannelsResponse,
            params={"part": "contentDetails", "mine": "true", "key": session.api_key},
            headers=session.headers(),
            what="liked playlist",
        )
        if not payload.items:
            raise ParseError("Youtube: no channel found for the authorized account")
        return payload.items[0].content_details.related_playlists.likes

    def _require_session(self) -> ApiKeySession:
        if self._session is None:
            raise AuthorizationError("Youtube: not authorized")
        return self._session
