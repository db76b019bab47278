"""SpotifyMetadataBackend implementation reading Spotify's public embed pages.

Embed pages (``open.spotify.com/embed/<type>/<id>``) need no credentials and
carry the full entity (name, artists, track list) in a ``__NEXT_DATA__`` JSON
script under ``props.pageProps.state.data.entity``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Final

from bs4 import BeautifulSoup

from discord_music_resolver.application.interfaces.metadata_backend import (
    SpotifyCollection,
    SpotifyCollectionTrack,
    SpotifyMetadataBackend,
    SpotifyPreview,
)
from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.domain.shared.exceptions import ExtractionError
from discord_music_resolver.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

EMBED_URL_TEMPLATE: Final[str] = "https://open.spotify.com/embed/{kind}/{id}"
NEXT_DATA_SCRIPT_ID: Final[str] = "__NEXT_DATA__"

SPOTIFY_URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:open|embed)\.spotify\.com/(?:intl-[\w-]+/)?(?:embed/)?(track|album|playlist)/([A-Za-z0-9]+)"
)
SPOTIFY_URI_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"spotify:(track|album|playlist):([A-Za-z0-9]+)"
)


def to_embed_url(url: str) -> str:
    """Map any Spotify track/album/playlist URL or URI onto its embed page."""
    match = SPOTIFY_URL_PATTERN.search(url) or SPOTIFY_URI_PATTERN.search(url)
    if not match:
        raise ExtractionError(url, ErrorMessages.SPOTIFY_URL_UNRECOGNIZED.format(url=url))
    kind, entity_id = match.groups()
    return EMBED_URL_TEMPLATE.format(kind=kind, id=entity_id)


def _join_artists(entity: dict[str, Any]) -> str:
    artists = entity.get("artists") or []
    names = [a.get("name") for a in artists if isinstance(a, dict) and a.get("name")]
    return ", ".join(names)


class SpotifyEmbedClient(SpotifyMetadataBackend):

    def __init__(self, page_fetcher: PageFetcher) -> None:
        self._fetcher = page_fetcher

    async def get_preview(self, url: str) -> SpotifyPreview:
        entity = await self._fetch_entity(url)
        title = entity.get("name") or entity.get("title")
        if not title:
            raise ExtractionError(url, ErrorMessages.SPOTIFY_ENTITY_MISSING.format(url=url))
        return SpotifyPreview(
            title=title,
            artist=_join_artists(entity) or entity.get("subtitle") or "",
        )

    async def get_data(self, url: str) -> SpotifyCollection:
        entity = await self._fetch_entity(url)
        tracks = [
            SpotifyCollectionTrack(title=t["title"], subtitle=t.get("subtitle") or "")
            for t in entity.get("trackList") or []
            if isinstance(t, dict) and t.get("title")
        ]
        return SpotifyCollection(
            type=str(entity.get("type", "")),
            name=entity.get("name") or entity.get("title") or "",
            subtitle=entity.get("subtitle") or _join_artists(entity),
            track_list=tracks,
        )

    async def _fetch_entity(self, url: str) -> dict[str, Any]:
        embed_url = to_embed_url(url)
        page = await self._fetcher.fetch_text(embed_url)
        if not page:
            raise ExtractionError(embed_url, ErrorMessages.PAGE_UNAVAILABLE.format(url=embed_url))

        logger.debug(LogTemplates.SPOTIFY_EMBED_FETCHED, embed_url)
        return self.parse_entity(page, embed_url)

    @staticmethod
    def parse_entity(page: str, url: str = "") -> dict[str, Any]:
        """Return ``props.pageProps.state.data.entity`` from an embed page."""
        soup = BeautifulSoup(page, "html.parser")
        script = soup.find("script", id=NEXT_DATA_SCRIPT_ID)
        if script is None or not script.string:
            raise ExtractionError(url, ErrorMessages.SPOTIFY_ENTITY_MISSING.format(url=url))

        try:
            data = json.loads(script.string)
            entity = data["props"]["pageProps"]["state"]["data"]["entity"]
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            raise ExtractionError(url, ErrorMessages.SPOTIFY_ENTITY_MISSING.format(url=url)) from exc

        if not isinstance(entity, dict):
            raise ExtractionError(url, ErrorMessages.SPOTIFY_ENTITY_MISSING.format(url=url))
        return entity
