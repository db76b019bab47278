"""SearchBackend implementation over YouTube's result pages and yt-dlp.

Filter facets are read from the ``ytInitialData`` blob embedded in the
results page. Each filter carries a URL that re-runs the search with that
filter applied, so refinements chain by fetching the previous filter's URL.
Only results URLs on the configured host are ever fetched; query text is
always sent as ``search_query``.
The final URL is handed to yt-dlp for a flat (metadata-only) extraction.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterator
from typing import Any, Final, cast
from urllib.parse import quote_plus

from bs4 import BeautifulSoup
from yt_dlp import YoutubeDL

from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.application.interfaces.search_backend import (
    FilterGroups,
    RawSearchItem,
    SearchBackend,
    SearchFilter,
)
from discord_music_resolver.config.settings import YouTubeSettings
from discord_music_resolver.domain.shared.duration_utils import ms_to_time
from discord_music_resolver.domain.shared.exceptions import ExtractionError
from discord_music_resolver.domain.shared.messages import ErrorMessages, LogTemplates
from discord_music_resolver.infrastructure.youtube.models import YtDlpEntryInfo, YtDlpOpts

logger = logging.getLogger(__name__)

INITIAL_DATA_MARKER: Final[str] = "ytInitialData"
FILTER_GROUP_KEY: Final[str] = "searchFilterGroupRenderer"
FILTER_KEY: Final[str] = "searchFilterRenderer"
FILTER_SELECTED: Final[str] = "FILTER_STATUS_SELECTED"
VIDEO_IE_KEY: Final[str] = "Youtube"


def _text(node: Any) -> str:
    """Read a YouTube text node (``simpleText`` or a list of ``runs``)."""
    if not isinstance(node, dict):
        return ""
    if "simpleText" in node:
        return str(node["simpleText"])
    return "".join(str(run.get("text", "")) for run in node.get("runs", []) if isinstance(run, dict))


def _find_all(node: Any, key: str) -> Iterator[Any]:
    if isinstance(node, dict):
        for k, v in node.items():
            if k == key:
                yield v
            else:
                yield from _find_all(v, key)
    elif isinstance(node, list):
        for item in node:
            yield from _find_all(item, key)


class YouTubeSearchBackend(SearchBackend):
    """Faceted YouTube search: results-page scraping for filters, yt-dlp for items."""

    def __init__(
        self,
        page_fetcher: PageFetcher,
        settings: YouTubeSettings | None = None,
        opts: YtDlpOpts | None = None,
    ) -> None:
        self._fetcher = page_fetcher
        self._settings = settings or YouTubeSettings()
        self._opts = opts or YtDlpOpts()

    @property
    def _results_prefix(self) -> str:
        return f"{self._settings.base_url}/results?"

    def results_url(self, query: str) -> str:
        return f"{self._results_prefix}search_query={quote_plus(query)}"

    def check_results_url(self, url: str) -> str:
        """Return ``url`` if it is a results page on the configured host, else raise."""
        if not url.startswith(self._results_prefix):
            raise ExtractionError(
                url,
                ErrorMessages.FILTER_URL_FOREIGN.format(url=url, base_url=self._settings.base_url),
            )
        return url

    async def get_filters(self, query: str) -> FilterGroups:
        return await self._load_filters(self.results_url(query), query)

    async def refine(self, filter_url: str) -> FilterGroups:
        return await self._load_filters(self.check_results_url(filter_url), filter_url)

    async def _load_filters(self, url: str, label: str) -> FilterGroups:
        page = await self._fetcher.fetch_text(url)
        if page is None:
            raise ExtractionError(url, ErrorMessages.PAGE_UNAVAILABLE.format(url=url))

        groups = self.parse_filters(self.load_initial_data(page, url), self._settings.base_url)
        logger.debug(LogTemplates.YOUTUBE_FILTERS_LOADED, len(groups), label)
        return groups

    @staticmethod
    def load_initial_data(page: str, url: str) -> dict[str, Any]:
        """Decode the ``ytInitialData`` object assigned in one of the page scripts."""
        soup = BeautifulSoup(page, "html.parser")
        decoder = json.JSONDecoder()
        for script in soup.find_all("script"):
            text = script.string or ""
            marker = text.find(INITIAL_DATA_MARKER)
            if marker == -1:
                continue
            start = text.find("{", marker)
            if start == -1:
                continue
            try:
                data, _ = decoder.raw_decode(text, start)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict):
                return data
        raise ExtractionError(url, ErrorMessages.YOUTUBE_INITIAL_DATA_MISSING.format(url=url))

    @staticmethod
    def parse_filters(data: dict[str, Any], base_url: str) -> FilterGroups:
        groups: FilterGroups = {}
        for group in _find_all(data, FILTER_GROUP_KEY):
            if not isinstance(group, dict):
                continue
            title = _text(group.get("title"))
            if not title:
                continue

            options = groups.setdefault(title, {})
            for entry in group.get("filters", []):
                renderer = entry.get(FILTER_KEY) if isinstance(entry, dict) else None
                if not isinstance(renderer, dict):
                    continue
                label = _text(renderer.get("label"))
                if not label:
                    continue

                active = renderer.get("status") == FILTER_SELECTED
                path = (
                    renderer.get("navigationEndpoint", {})
                    .get("commandMetadata", {})
                    .get("webCommandMetadata", {})
                    .get("url")
                )
                # The endpoint of a selected filter removes it again.
                url = f"{base_url}{path}" if path and not active else None
                options[label] = SearchFilter(name=label, url=url, active=active)
        return groups

    async def execute(self, filter_url: str, limit: int) -> list[RawSearchItem]:
        url = self.check_results_url(filter_url)
        entries = await asyncio.to_thread(self._execute_sync, url, limit)
        logger.debug(LogTemplates.YOUTUBE_SEARCH_EXECUTED, filter_url, len(entries))
        return [self._to_raw_item(entry) for entry in entries]

    def _execute_sync(self, filter_url: str, limit: int) -> list[YtDlpEntryInfo]:
        opts = self._opts.model_copy(
            update={"extract_flat": True, "noplaylist": False, "playlistend": limit}
        )
        with YoutubeDL(params=cast(Any, opts.to_params())) as ydl:
            data = ydl.extract_info(filter_url, download=False)
        if not isinstance(data, dict):
            return []
        entries = [e for e in data.get("entries") or [] if isinstance(e, dict)]
        return [YtDlpEntryInfo.model_validate(e) for e in entries[:limit]]

    @staticmethod
    def _to_raw_item(entry: YtDlpEntryInfo) -> RawSearchItem:
        return RawSearchItem(
            type="video" if entry.ie_key == VIDEO_IE_KEY else (entry.ie_key or "unknown").lower(),
            title=entry.title,
            url=entry.url or "",
            duration=ms_to_time(entry.duration * 1000) if entry.duration is not None else None,
            author_name=entry.author,
            is_live=entry.is_live,
            thumbnail_url=entry.best_thumbnail,
        )
