"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, assert_never

from music_exporter.adapters import (
    AnyPlatformClient,
    DeezerClient,
    JsonCatalogStore,
    SpotifyClient,
    YoutubeClient,
)
from music_exporter.config import (
    DeezerConfig,
    SpotifyConfig,
    YoutubeConfig,
    get_callback_config,
    get_deezer_config,
    get_spotify_config,
    get_storage_config,
    get_youtube_config,
)
from music_exporter.domain.orchestrator import MergeOrchestrator
from music_exporter.domain.platforms import Platform

if TYPE_CHECKING:
    from pathlib import Path

    from music_exporter.config import CallbackConfig
    from music_exporter.config.env import Prompt
    from music_exporter.domain.orchestrator import ClientFactory, ExportResult
    from music_exporter.domain.ports import CatalogStore

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExportRequest:
    music_file: Path
    platforms: tuple[Platform, ...]
    remove_duplicates: bool = True
    sort: bool = True
    youtube_playlist_id: str | None = None
    callback_port: int | None = None


type PlatformConfig = DeezerConfig | SpotifyConfig | YoutubeConfig


def load_platform_config(
    platform: Platform,
    *,
    callback: CallbackConfig,
    youtube_playlist_id: str | None = None,
    prompt: Prompt | None = None,
) -> PlatformConfig:
    """Read the credentials of ``platform``, prompting for missing ones if allowed."""

    match platform:
        case Platform.DEEZER:
            return get_deezer_config(prompt=prompt)
        case Platform.SPOTIFY:
            return get_spotify_config(callback=callback, prompt=prompt)
        case Platform.YOUTUBE:
            return get_youtube_config(
                callback=callback,
                playlist_id=youtube_playlist_id,
                prompt=prompt,
            )
        case _:
            assert_never(platform)


def build_platform_client(config: PlatformConfig) -> AnyPlatformClient:
    match config:
        case DeezerConfig():
            return DeezerClient(config=config)
        case SpotifyConfig():
            return SpotifyClient(config=config)
        case YoutubeConfig():
            return YoutubeClient(config=config)
        case _:
            assert_never(config)


def default_client_factory(
    request: ExportRequest,
    *,
    prompt: Prompt | None = None,
) -> ClientFactory:
    """Resolve every requested platform's credentials up front.

    Must run outside the event loop: ``prompt`` reads from the terminal.
    """

    callback = get_callback_config(port=request.callback_port)
    configs = {
        platform: load_platform_config(
            platform,
            callback=callback,
            youtube_playlist_id=request.youtube_playlist_id,
            prompt=prompt,
        )
        for platform in request.platforms
    }

    def factory(platform: Platform) -> AnyPlatformClient:
        return build_platform_client(configs[platform])

    return factory


def default_store(request: ExportRequest) -> JsonCatalogStore:
    storage = get_storage_config(request.music_file)
    return JsonCatalogStore(storage.resolve_music_file())


async def export_music_async(
    request: ExportRequest,
    *,
    client_factory: ClientFactory,
    store: CatalogStore | None = None,
) -> ExportResult:
    orchestrator = MergeOrchestrator(
        store=store or default_store(request),
        client_factory=client_factory,
        remove_duplicates=request.remove_duplicates,
        sort=request.sort,
    )
    return await orchestrator.run(request.platforms)


def export_music(
    request: ExportRequest,
    *,
    client_factory: ClientFactory | None = None,
    store: CatalogStore | None = None,
    prompt: Prompt | None = None,
) -> ExportResult:
    """Fetch the requested platforms and merge them into the catalog file."""

    log.info(
        f"Starting export: platforms={','.join(request.platforms)}, "
        f"music_file={request.music_file}, remove_duplicates={request.remove_duplicates}, "
        f"sort={request.sort}"
    )
    if client_factory is None:
        client_factory = default_client_factory(request, prompt=prompt)
    result = asyncio.run(export_music_async(request, client_factory=client_factory, store=store))
    log.info(
        f"Finished export: stored={len(result.records)}, fetched={result.fetched}, "
        f"existing={result.existing}, duplicates={result.duplicates}"
    )
    return result
