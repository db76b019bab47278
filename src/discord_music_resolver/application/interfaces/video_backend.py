"""Port interface and payload models for video/playlist lookups by id."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from discord_music_resolver.domain.shared.types import NonEmptyStr, NonNegativeInt


class VideoDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    duration: NonNegativeInt | None = None  # seconds
    channel_name: str = ""
    is_live_content: bool = False
    thumbnail: str | None = None


class PlaylistVideo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: NonEmptyStr
    title: str
    duration: NonNegativeInt | None = None  # seconds
    channel_name: str = ""
    is_live: bool = False
    thumbnail: str | None = None


class PlaylistVideos(ABC):
    """Ordered, page-wise loaded videos of a playlist."""

    @property
    @abstractmethod
    def items(self) -> list[PlaylistVideo]:
        """Videos loaded so far, in playlist order."""
        ...

    @abstractmethod
    async def next(self, pages: int = 1) -> list[PlaylistVideo]:
        """Load up to ``pages`` further pages and return the newly loaded videos."""
        ...


class PlaylistDetails(BaseModel):
    """A fetched playlist or mix.

    ``channel_name`` is None for auto-generated mixes, which are never paginated.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str
    channel_name: str | None = None
    video_count: NonNegativeInt = 0
    is_mix: bool = False
    videos: PlaylistVideos


class VideoBackend(ABC):
    """Interface for fetching videos and playlists directly by id."""

    @abstractmethod
    async def get_video(self, video_id: NonEmptyStr) -> VideoDetails | None:
        ...

    @abstractmethod
    async def get_playlist(self, playlist_id: NonEmptyStr) -> PlaylistDetails | None:
        ...
