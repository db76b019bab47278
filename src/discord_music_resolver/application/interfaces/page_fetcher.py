"""Port interface for fetching web pages as text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from discord_music_resolver.domain.shared.types import HttpUrlStr


class PageFetcher(ABC):
    """Interface for plain HTTP GETs whose failures are soft."""

    @abstractmethod
    async def fetch_text(self, url: HttpUrlStr) -> str | None:
        """Return the response body, or None when the page could not be fetched."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        ...
