"""Dependency Injection Container

Manages the resolver's dependency graph, providing lazy initialization
and lifecycle management for the HTTP client, provider adapters and services.
Components are created on-demand and cached for reuse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.metadata_backend import SpotifyMetadataBackend
    from ..application.interfaces.page_extractor import ApplePageExtractor
    from ..application.interfaces.page_fetcher import PageFetcher
    from ..application.interfaces.search_backend import SearchBackend
    from ..application.interfaces.video_backend import VideoBackend
    from ..application.services.resolver_service import TrackResolverService
    from ..application.services.search_service import SearchService
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Adapters can be
    swapped by assigning the private slot before the first access.
    """

    settings: Settings

    # Infrastructure adapters
    _page_fetcher: PageFetcher | None = None
    _search_backend: SearchBackend | None = None
    _video_backend: VideoBackend | None = None
    _spotify_backend: SpotifyMetadataBackend | None = None
    _apple_extractor: ApplePageExtractor | None = None

    # Application services
    _search_service: SearchService | None = None
    _resolver: TrackResolverService | None = None

    # === Infrastructure ===

    @property
    def page_fetcher(self) -> PageFetcher:
        """Get the shared HTTP page fetcher."""
        if self._page_fetcher is None:
            from ..infrastructure.http.page_fetcher import HttpxPageFetcher

            self._page_fetcher = HttpxPageFetcher(self.settings.http)
        return self._page_fetcher

    @property
    def search_backend(self) -> SearchBackend:
        if self._search_backend is None:
            from ..infrastructure.youtube.search_backend import YouTubeSearchBackend

            self._search_backend = YouTubeSearchBackend(self.page_fetcher, self.settings.youtube)
        return self._search_backend

    @property
    def video_backend(self) -> VideoBackend:
        if self._video_backend is None:
            from ..infrastructure.youtube.video_backend import YtDlpVideoBackend

            self._video_backend = YtDlpVideoBackend(self.settings.youtube)
        return self._video_backend

    @property
    def spotify_backend(self) -> SpotifyMetadataBackend:
        if self._spotify_backend is None:
            from ..infrastructure.spotify.embed_client import SpotifyEmbedClient

            self._spotify_backend = SpotifyEmbedClient(self.page_fetcher)
        return self._spotify_backend

    @property
    def apple_extractor(self) -> ApplePageExtractor:
        if self._apple_extractor is None:
            from ..infrastructure.apple.page_extractor import AppleMusicPageExtractor

            self._apple_extractor = AppleMusicPageExtractor(self.page_fetcher)
        return self._apple_extractor

    # === Application Services ===

    @property
    def search_service(self) -> SearchService:
        """Get the filtered text search service."""
        if self._search_service is None:
            from ..application.services.search_service import SearchService

            self._search_service = SearchService(
                search_backend=self.search_backend,
                settings=self.settings.search,
            )
        return self._search_service

    @property
    def resolver(self) -> TrackResolverService:
        """Get the track/playlist resolver."""
        if self._resolver is None:
            from ..application.services.resolver_service import TrackResolverService

            self._resolver = TrackResolverService(
                search_service=self.search_service,
                apple_extractor=self.apple_extractor,
                spotify_backend=self.spotify_backend,
                video_backend=self.video_backend,
                youtube_settings=self.settings.youtube,
            )
        return self._resolver

    # === Lifecycle ===

    async def aclose(self) -> None:
        """Release network resources."""
        if self._page_fetcher is not None:
            try:
                await self._page_fetcher.aclose()
            except Exception as exc:
                logger.warning("Failed closing page fetcher: %r", exc)
            self._page_fetcher = None


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
