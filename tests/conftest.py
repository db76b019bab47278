"""Shared fixtures and in-memory backend fakes."""

from __future__ import annotations

import pytest

from discord_music_resolver.application.interfaces.metadata_backend import (
    SpotifyCollection,
    SpotifyMetadataBackend,
    SpotifyPreview,
)
from discord_music_resolver.application.interfaces.page_extractor import ApplePageExtractor
from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.application.interfaces.search_backend import (
    FilterGroups,
    RawSearchItem,
    SearchBackend,
    SearchFilter,
)
from discord_music_resolver.application.interfaces.video_backend import (
    PlaylistDetails,
    PlaylistVideo,
    PlaylistVideos,
    VideoBackend,
    VideoDetails,
)
from discord_music_resolver.config.settings import SearchSettings, YouTubeSettings

BASE = "https://www.youtube.com"


# ============================================================================
# Backend Fakes
# ============================================================================


class FakePageFetcher(PageFetcher):
    """Serves canned pages keyed by URL; unknown URLs soft-fail with None."""

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages = pages or {}
        self.requested: list[str] = []
        self.closed = False

    async def fetch_text(self, url: str) -> str | None:
        self.requested.append(url)
        return self.pages.get(url)

    async def aclose(self) -> None:
        self.closed = True


def video_filters(query: str) -> FilterGroups:
    """Facets as returned for a plain text query."""
    return {
        "Type": {
            "Video": SearchFilter(name="Video", url=f"{BASE}/video?q={query}"),
            "Channel": SearchFilter(name="Channel", url=f"{BASE}/channel?q={query}"),
        },
    }


def refined_filters(current_url: str) -> FilterGroups:
    """Facets offered once a filter is applied; URLs append the chosen option."""
    return {
        "Upload date": {
            "Last hour": SearchFilter(name="Last hour", url=f"{current_url}&date=hour"),
            "Today": SearchFilter(name="Today", url=f"{current_url}&date=today"),
            "This week": SearchFilter(name="This week", url=f"{current_url}&date=week"),
        },
        "Duration": {
            "Under 4 minutes": SearchFilter(name="Under 4 minutes", url=f"{current_url}&len=short"),
            "4 - 20 minutes": SearchFilter(name="4 - 20 minutes", url=f"{current_url}&len=medium"),
            "Over 20 minutes": SearchFilter(name="Over 20 minutes", url=f"{current_url}&len=long"),
        },
        "Sort by": {
            "Relevance": SearchFilter(name="Relevance", url=None, active=True),
            "Upload date": SearchFilter(name="Upload date", url=f"{current_url}&sort=date"),
            "View count": SearchFilter(name="View count", url=f"{current_url}&sort=views"),
        },
    }


def raw_video(title: str, n: int = 0, **overrides) -> RawSearchItem:
    fields = {
        "type": "video",
        "title": title,
        "url": f"{BASE}/watch?v=vid{n:08d}",
        "duration": "03:30",
        "author_name": "Channel",
        "thumbnail_url": "https://i.ytimg.com/thumb.jpg",
    }
    fields.update(overrides)
    return RawSearchItem(**fields)


def query_from_url(url: str) -> str:
    """Recover the query text from a fake filter URL."""
    return url.split("?q=", 1)[1].split("&", 1)[0]


class FakeSearchBackend(SearchBackend):
    """Answers every query with one video named after the query.

    Queries listed in ``failing`` raise, those in ``empty`` return no items.
    ``results`` overrides the items returned for a given query text.
    """

    def __init__(self) -> None:
        self.failing: set[str] = set()
        self.empty: set[str] = set()
        self.results: dict[str, list[RawSearchItem]] = {}
        self.filter_requests: list[str] = []
        self.executed: list[tuple[str, int]] = []

    async def get_filters(self, query: str) -> FilterGroups:
        self.filter_requests.append(query)
        if query in self.failing:
            raise RuntimeError(f"backend exploded on {query}")
        return video_filters(query)

    async def refine(self, filter_url: str) -> FilterGroups:
        self.filter_requests.append(filter_url)
        return refined_filters(filter_url)

    async def execute(self, filter_url: str, limit: int) -> list[RawSearchItem]:
        self.executed.append((filter_url, limit))
        query = query_from_url(filter_url)
        if query in self.empty:
            return []
        items = self.results.get(query, [raw_video(query)])
        return items[:limit]


class FakeAppleExtractor(ApplePageExtractor):
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, object]] = []

    async def extract(self, url, kind=None):
        self.calls.append((url, kind))
        if self.error is not None:
            raise self.error
        return self.result


class FakeSpotifyBackend(SpotifyMetadataBackend):
    def __init__(
        self,
        preview: SpotifyPreview | None = None,
        collection: SpotifyCollection | None = None,
        error: Exception | None = None,
    ) -> None:
        self.preview = preview
        self.collection = collection
        self.error = error

    async def get_preview(self, url: str) -> SpotifyPreview:
        if self.error is not None or self.preview is None:
            raise self.error or RuntimeError("no preview")
        return self.preview

    async def get_data(self, url: str) -> SpotifyCollection:
        if self.error is not None or self.collection is None:
            raise self.error or RuntimeError("no data")
        return self.collection


class FakePlaylistVideos(PlaylistVideos):
    """Holds every video up front and reveals ``page_size`` more per page."""

    def __init__(self, all_videos: list[PlaylistVideo], page_size: int) -> None:
        self._all = all_videos
        self._page_size = page_size
        self._loaded = min(page_size, len(all_videos))
        self.next_calls: list[int] = []

    @property
    def items(self) -> list[PlaylistVideo]:
        return self._all[: self._loaded]

    async def next(self, pages: int = 1) -> list[PlaylistVideo]:
        self.next_calls.append(pages)
        before = self._loaded
        self._loaded = min(len(self._all), self._loaded + pages * self._page_size)
        return self._all[before : self._loaded]


class FakeVideoBackend(VideoBackend):
    def __init__(self) -> None:
        self.videos: dict[str, VideoDetails] = {}
        self.playlists: dict[str, PlaylistDetails] = {}

    async def get_video(self, video_id: str) -> VideoDetails | None:
        return self.videos.get(video_id)

    async def get_playlist(self, playlist_id: str) -> PlaylistDetails | None:
        return self.playlists.get(playlist_id)


def make_videos(count: int) -> list[PlaylistVideo]:
    return [
        PlaylistVideo(id=f"vid{i:08d}", title=f"Video {i}", duration=60 + i, channel_name="Uploader")
        for i in range(count)
    ]


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def search_backend():
    return FakeSearchBackend()


@pytest.fixture
def video_backend():
    return FakeVideoBackend()


@pytest.fixture
def youtube_settings():
    return YouTubeSettings(page_size=10)


@pytest.fixture
def search_service(search_backend):
    from discord_music_resolver.application.services.search_service import SearchService

    return SearchService(search_backend=search_backend, settings=SearchSettings(default_limit=5))


@pytest.fixture
def make_resolver(search_service, video_backend, youtube_settings):
    """Build a resolver around the shared fakes with per-test provider stubs."""
    from discord_music_resolver.application.services.resolver_service import TrackResolverService

    def _make(apple=None, spotify=None):
        return TrackResolverService(
            search_service=search_service,
            apple_extractor=apple or FakeAppleExtractor(),
            spotify_backend=spotify or FakeSpotifyBackend(),
            video_backend=video_backend,
            youtube_settings=youtube_settings,
        )

    return _make


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_song():
    """Create a sample song for testing."""
    from discord_music_resolver.domain.music.entities import Song

    return Song(
        name="Test Song",
        url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        duration="03:32",
        author="Test Artist",
        thumbnail="https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
    )
