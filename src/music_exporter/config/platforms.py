"""Per-platform credential configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .env import env_name, int_env_var, optional_env_var, require_env_vars

if TYPE_CHECKING:
    from .env import Prompt

DEFAULT_CALLBACK_PORT: Final[int] = 8000

SPOTIFY_SCOPES: Final[tuple[str, ...]] = ("playlist-read-private", "user-library-read")
YOUTUBE_SCOPES: Final[tuple[str, ...]] = ("https://www.googleapis.com/auth/youtube.readonly",)


@dataclass(frozen=True, slots=True)
class CallbackConfig:
    """Where the local authorization listener binds and what providers redirect to."""

    host: str = "127.0.0.1"
    port: int = DEFAULT_CALLBACK_PORT
    redirect_host: str = "localhost"

    @property
    def redirect_uri(self) -> str:
        return f"http://{self.redirect_host}:{self.port}"


@dataclass(frozen=True, slots=True)
class DeezerConfig:
    cookie: str = field(repr=False)
    user_id: str


@dataclass(frozen=True, slots=True)
class SpotifyConfig:
    client_id: str
    client_secret: str = field(repr=False)
    callback: CallbackConfig = field(default_factory=CallbackConfig)
    scope: tuple[str, ...] = SPOTIFY_SCOPES


@dataclass(frozen=True, slots=True)
class YoutubeConfig:
    api_key: str = field(repr=False)
    client_id: str
    client_secret: str = field(repr=False)
    callback: CallbackConfig = field(default_factory=CallbackConfig)
    playlist_id: str | None = None
    scope: tuple[str, ...] = YOUTUBE_SCOPES


def get_callback_config(*, port: int | None = None) -> CallbackConfig:
    if port is None:
        port = int_env_var(env_name("CALLBACK_PORT"), default=DEFAULT_CALLBACK_PORT)
    return CallbackConfig(port=port)


def get_deezer_config(*, prompt: Prompt | None = None) -> DeezerConfig:
    cookie, user_id = env_name("DEEZER_COOKIE"), env_name("DEEZER_USER_ID")
    values = require_env_vars((cookie, user_id), prompt=prompt)
    return DeezerConfig(cookie=values[cookie], user_id=values[user_id])


def get_spotify_config(
    *,
    callback: CallbackConfig | None = None,
    prompt: Prompt | None = None,
) -> SpotifyConfig:
    client_id = env_name("SPOTIFY_ID_CLIENT")
    client_secret = env_name("SPOTIFY_ID_CLIENT_SECRET")
    values = require_env_vars((client_id, client_secret), prompt=prompt)
    return SpotifyConfig(
        client_id=values[client_id],
        client_secret=values[client_secret],
        callback=callback or get_callback_config(),
    )


def get_youtube_config(
    *,
    callback: CallbackConfig | None = None,
    playlist_id: str | None = None,
    prompt: Prompt | None = None,
) -> YoutubeConfig:
    api_key = env_name("YOUTUBE_API_KEY")
    client_id = env_name("YOUTUBE_ID_CLIENT")
    client_secret = env_name("YOUTUBE_ID_CLIENT_SECRET")
    values = require_env_vars((api_key, client_id, client_secret), prompt=prompt)
    return YoutubeConfig(
        api_key=values[api_key],
        client_id=values[client_id],
        client_secret=values[client_secret],
        callback=callback or get_callback_config(),
        playlist_id=playlist_id or optional_env_var(env_name("YOUTUBE_PLAYLIST_ID")),
    )
