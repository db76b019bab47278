"""HTTP infrastructure - httpx page fetching."""

from discord_music_resolver.infrastructure.http.page_fetcher import HttpxPageFetcher

__all__ = ["HttpxPageFetcher"]
