#!/usr/bin/env python3
"""Command-line entry point for the music resolver."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from discord_music_resolver.domain.shared.exceptions import DomainError
from discord_music_resolver.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from discord_music_resolver.config.settings import Settings

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discord-music-resolver",
        description="Resolve YouTube, Spotify and Apple Music input into playable songs.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Resolve a link or search text to one song")
    resolve.add_argument("query")
    resolve.add_argument("--timecode", action="store_true", help="Honour ?t= on YouTube links")

    search = sub.add_parser("search", help="Run a filtered video search")
    search.add_argument("query")
    search.add_argument("--limit", type=positive_int, default=None)
    search.add_argument("--upload-date", default=None)
    search.add_argument("--duration", default=None)
    search.add_argument("--sort-by", default="relevance")

    playlist = sub.add_parser("playlist", help="Resolve an album or playlist link")
    playlist.add_argument("url")
    playlist.add_argument("--max-songs", type=positive_int, default=None)
    playlist.add_argument("--shuffle", action="store_true")

    return parser


async def run(args: argparse.Namespace, settings: Settings) -> int:
    from discord_music_resolver.application.services.resolver_models import (
        PlaylistOptions,
        SearchOptions,
    )
    from discord_music_resolver.config.container import create_container

    container = create_container(settings)
    resolver = container.resolver
    try:
        if args.command == "resolve":
            song = await resolver.best(args.query, SearchOptions(timecode=args.timecode))
            if song is None:
                return 1
            print(song.model_dump_json(indent=2))
        elif args.command == "search":
            options = SearchOptions(
                upload_date=args.upload_date,
                duration=args.duration,
                sort_by=args.sort_by,
            )
            songs = await resolver.search(args.query, options, args.limit)
            print(json.dumps([s.model_dump(mode="json") for s in songs], indent=2))
        else:
            options = PlaylistOptions(max_songs=args.max_songs, shuffle=args.shuffle)
            playlist = await resolver.playlist(args.url, options)
            print(playlist.model_dump_json(indent=2))
        return 0
    finally:
        await container.aclose()


def main(argv: Sequence[str] | None = None) -> int:
    from discord_music_resolver.config.settings import get_settings

    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.RESOLVER_STARTING, getattr(args, "query", None) or args.url, settings.environment)

    try:
        return asyncio.run(run(args, settings))
    except DomainError as e:
        logger.error(LogTemplates.RESOLVER_FAILED, e)
        return 1
    except ValidationError as e:
        logger.error(LogTemplates.RESOLVER_INVALID_OPTIONS, e)
        return 2
    except KeyboardInterrupt:
        return 130


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
