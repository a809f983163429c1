from __future__ import annotations

import asyncio
import base64

import httpx
import pytest

from music_exporter.adapters.spotify import SpotifyClient
from music_exporter.adapters.spotify.client import SPOTIFY_SAVED_TRACKS_URL, SPOTIFY_TOKEN_URL
from music_exporter.config import CallbackConfig, SpotifyConfig
from music_exporter.domain.errors import AuthorizationError, ParseError
from music_exporter.domain.model import MusicRecord, Page
from music_exporter.domain.session import BearerSession
from tests.support.fakes import RecordingTransport, fixed_code_provider, load_payload

CONFIG = SpotifyConfig(
    client_id="client",
    client_secret="secret",
    callback=CallbackConfig(port=8123),
)


def _handler(saved_tracks: object) -> RecordingTransport:
    def handle(request: httpx.Request) -> httpx.Response:
        if request.url == httpx.URL(SPOTIFY_TOKEN_URL):
            return httpx.Response(200, json={"access_token": "spotify-token", "expires_in": 3600})
        return httpx.Response(200, json=saved_tracks)

    return RecordingTransport(handle)


def _authorized_page(
    transport: RecordingTransport,
    cursor: int | None = None,
    seen_urls: list[str] | None = None,
) -> tuple[BearerSession, Page[int]]:
    client = SpotifyClient(
        config=CONFIG,
        code_provider=fixed_code_provider("the-code", seen_urls),
        transport=transport,
    )

    async def scenario() -> tuple[BearerSession, Page[int]]:
        async with client:
            session = await client.authorize()
            return session, await client.fetch_page(cursor)

    return asyncio.run(scenario())


def test_authorize_exchanges_code_with_basic_auth() -> None:
    transport = _handler({"items": []})
    seen_urls: list[str] = []

    session, _page = _authorized_page(transport, seen_urls=seen_urls)

    assert session == BearerSession(access_token="spotify-token")
    token_request = transport.requests[0]
    assert token_request.method == "POST"
    expected = base64.b64encode(b"client:secret").decode()
    assert token_request.headers["Authorization"] == f"Basic {expected}"
    assert b"redirect_uri=http%3A%2F%2Flocalhost%3A8123" in token_request.content

    (authorize_url,) = seen_urls
    params = httpx.URL(authorize_url).params
    assert authorize_url.startswith("https://accounts.spotify.com/authorize?")
    assert params["scope"] == "playlist-read-private user-library-read"
    assert params["redirect_uri"] == "http://localhost:8123"


def test_fetch_page_translates_saved_tracks() -> None:
    transport = _handler(load_payload("spotify_saved_tracks.json"))

    _session, page = _authorized_page(transport)

    assert page.next_cursor == 50
    assert page.items == (
        MusicRecord(
            author="Radiohead",
            title="Paranoid Android",
            url="https://open.spotify.com/track/6LgJvl0Xdtc73RJ1mmpotq",
            thumbnail="https://i.scdn.co/image/large",
            date="1997-05-21",
            album="OK Computer",
        ),
        MusicRecord(
            author="Unknown",
            title="Local File",
            url=None,
            thumbnail=None,
            date=None,
            album="Unknown Album",
        ),
    )


def test_fetch_page_sends_bearer_and_offset() -> None:
    transport = _handler({"offset": 100, "next": None, "items": []})

    _session, page = _authorized_page(transport, cursor=100)

    request = transport.requests[-1]
    assert str(request.url).startswith(f"{SPOTIFY_SAVED_TRACKS_URL}?")
    assert request.url.params["limit"] == "50"
    assert request.url.params["offset"] == "100"
    assert request.headers["Authorization"] == "Bearer spotify-token"
    assert page.next_cursor is None


def test_malformed_listing_is_parse_error() -> None:
    transport = _handler({"items": [{"track": {"album": {"name": "x"}}}]})

    with pytest.raises(ParseError, match="saved tracks"):
        _authorized_page(transport)


def test_fetch_before_authorize_fails() -> None:
    client = SpotifyClient(config=CONFIG, code_provider=fixed_code_provider("unused"))

    async def scenario() -> None:
        async with client:
            await client.fetch_page(None)

    with pytest.raises(AuthorizationError, match="Spotify: not authorized"):
        asyncio.run(scenario())
