#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from music_exporter.app import ExportRequest, export_music
from music_exporter.config import ConfigError, configure_logging
from music_exporter.domain.errors import MusicExporterError
from music_exporter.domain.platforms import Platform

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="music-exporter",
        description="Exports liked music of the given platforms into one JSON file",
    )
    parser.add_argument(
        "--music-file",
        type=Path,
        required=True,
        help="Path to the JSON catalog to merge into",
    )
    parser.add_argument(
        "--platform",
        dest="platforms",
        type=Platform,
        choices=list(Platform),
        nargs="+",
        action="extend",
        required=True,
        help="Target platforms, fetched in the given order",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Path to an optional .env file with credentials",
    )
    parser.add_argument(
        "--youtube-playlist-id",
        "--ytb-playlist-id",
        help="YouTube playlist to export instead of the liked videos",
    )
    parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Do not remove duplicate tracks",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep the catalog in fetch order",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port of the local OAuth callback listener (default: 8000)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def load_env(env_file: Path | None) -> None:
    if env_file is None:
        return
    if not env_file.is_file():
        raise ConfigError(f"Failed to load env file {env_file}")
    load_dotenv(env_file, override=False)


def _prompt(message: str) -> str:
    return input(message)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    request = ExportRequest(
        music_file=parsed_args.music_file,
        platforms=tuple(parsed_args.platforms),
        remove_duplicates=not parsed_args.keep_duplicates,
        sort=not parsed_args.no_sort,
        youtube_playlist_id=parsed_args.youtube_playlist_id,
        callback_port=parsed_args.port,
    )
    prompt = _prompt if sys.stdin.isatty() else None

    try:
        load_env(parsed_args.env_file)
        export_music(request, prompt=prompt)
    except ConfigError as exc:
        log.error(f"Configuration error: {exc}")  # noqa: TRY400
        sys.exit(2)
    except MusicExporterError as exc:
        log.error(str(exc))  # noqa: TRY400
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nClosed by user (Ctrl+C)")
        sys.exit(130)


if __name__ == "__main__":
    main()
