"""PageFetcher implementation backed by a shared httpx.AsyncClient."""

from __future__ import annotations

import logging

import httpx

from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.config.settings import HttpSettings
from discord_music_resolver.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class HttpxPageFetcher(PageFetcher):
    """Fetches pages as text; network and HTTP status failures yield None.

    The underlying client is created on first use and reused until
    :meth:`aclose`. A client passed in by the caller is never closed here.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or HttpSettings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                follow_redirects=True,
                timeout=httpx.Timeout(self._settings.timeout_s),
                headers={
                    "User-Agent": self._settings.user_agent,
                    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                    "Accept-Language": self._settings.accept_language,
                },
            )
        return self._client

    async def fetch_text(self, url: str) -> str | None:
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(LogTemplates.HTTP_FETCH_FAILED, url, exc)
            return None
        return response.text

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug(LogTemplates.HTTP_CLIENT_CLOSED)

    async def __aenter__(self) -> HttpxPageFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
