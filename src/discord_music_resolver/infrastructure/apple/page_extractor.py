"""ApplePageExtractor implementation scraping Apple Music's serialized server data."""

from __future__ import annotations

import json
import logging
from typing import Any, Final

from bs4 import BeautifulSoup, NavigableString

from discord_music_resolver.application.interfaces.page_extractor import ApplePageExtractor
from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.domain.music.entities import (
    AppleExtraction,
    AppleTrackListResult,
    AppleTrackResult,
    ScrapedTrack,
    ScrapedTrackList,
)
from discord_music_resolver.domain.music.link_classifier import apple_link_kind
from discord_music_resolver.domain.music.value_objects import AppleLinkKind
from discord_music_resolver.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

SERVER_DATA_SCRIPT_ID: Final[str] = "serialized-server-data"
TRACK_LIST_SECTION_MARKER: Final[str] = "track-list - "


class AppleMusicPageExtractor(ApplePageExtractor):
    """Reads artist/title pairs from the ``track-list`` sections of an Apple Music page.

    The page embeds its data as JSON in a ``<script id="serialized-server-data">``
    element. Every section whose id contains ``"track-list - "`` contributes its
    items, in document order. A page that cannot be fetched, carries no server
    data, or lists no tracks yields None.
    """

    def __init__(self, page_fetcher: PageFetcher) -> None:
        self._fetcher = page_fetcher

    async def extract(
        self, url: str, kind: AppleLinkKind | None = None
    ) -> AppleExtraction | None:
        kind = kind or apple_link_kind(url)

        page = await self._fetcher.fetch_text(url)
        if not page:
            return None

        payload = self.load_server_data(page, url)
        if payload is None:
            return None

        track_list = self.collect_tracks(payload, url)
        logger.debug(LogTemplates.APPLE_TRACKS_EXTRACTED, track_list.count, url, kind)
        if track_list.count == 0:
            return None

        if kind is AppleLinkKind.SONG:
            return AppleTrackResult(track=track_list.tracks[0])
        return AppleTrackListResult(track_list=track_list)

    @staticmethod
    def load_server_data(page: str, url: str = "") -> Any | None:
        """Parse the JSON held by the first text node of the server-data script."""
        soup = BeautifulSoup(page, "html.parser")

        for script in soup.find_all("script"):
            if script.get("id") != SERVER_DATA_SCRIPT_ID:
                continue
            for child in script.children:
                if isinstance(child, NavigableString):
                    try:
                        return json.loads(str(child))
                    except json.JSONDecodeError as exc:
                        logger.warning(LogTemplates.APPLE_SERVER_DATA_INVALID, url, exc)
                        return None
            break

        logger.warning(LogTemplates.APPLE_SERVER_DATA_MISSING, url)
        return None

    @staticmethod
    def collect_tracks(payload: Any, url: str = "") -> ScrapedTrackList:
        """Merge the items of every ``track-list`` section of the first data record."""
        track_list = ScrapedTrackList()
        try:
            sections = payload[0]["data"]["sections"]
        except (KeyError, IndexError, TypeError):
            logger.warning(LogTemplates.APPLE_SECTIONS_MISSING, url)
            return track_list

        for section in sections:
            if not isinstance(section, dict):
                continue
            if TRACK_LIST_SECTION_MARKER not in str(section.get("id", "")):
                continue
            for item in section.get("items") or []:
                title = item.get("title") if isinstance(item, dict) else None
                if not title:
                    continue
                track_list.add_track(ScrapedTrack(artist=item.get("artistName") or "", title=title))
        return track_list
