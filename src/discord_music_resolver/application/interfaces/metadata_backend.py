"""Port interface and payload models for Spotify-style metadata lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from discord_music_resolver.domain.shared.types import HttpUrlStr


class SpotifyPreview(BaseModel):
    """Lightweight metadata of a single track."""

    model_config = ConfigDict(frozen=True)

    title: str
    artist: str = ""

    @property
    def search_query(self) -> str:
        return f"{self.artist} - {self.title}"


class SpotifyCollectionTrack(BaseModel):
    """A track listed in an album or playlist; ``subtitle`` holds the artists."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    subtitle: str = ""

    @property
    def search_query(self) -> str:
        return f"{self.subtitle} - {self.title}"


class SpotifyCollection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    name: str = ""
    subtitle: str = ""
    track_list: list[SpotifyCollectionTrack] = Field(default_factory=list)


class SpotifyMetadataBackend(ABC):
    """Interface for reading track and collection metadata from Spotify URLs."""

    @abstractmethod
    async def get_preview(self, url: HttpUrlStr) -> SpotifyPreview:
        """Return artist/title of a track URL. Raises on failure."""
        ...

    @abstractmethod
    async def get_data(self, url: HttpUrlStr) -> SpotifyCollection:
        """Return name, owner and track list of an album/playlist URL. Raises on failure."""
        ...
