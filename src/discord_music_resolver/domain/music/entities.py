"""Core domain entities for the music bounded context."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from discord_music_resolver.domain.music.value_objects import AppleLinkKind, PlaylistType
from discord_music_resolver.domain.shared.duration_utils import time_to_ms
from discord_music_resolver.domain.shared.types import DurationMs, NonEmptyStr


class Song(BaseModel):
    """Immutable, provider-agnostic representation of a playable track."""

    model_config = ConfigDict(frozen=True)

    name: NonEmptyStr
    url: NonEmptyStr
    duration: str | None = None
    author: str = ""
    is_live: bool = False
    thumbnail: str | None = None

    # Playback start offset, only set for links carrying a timecode
    seek_time: DurationMs | None = None

    # Opaque caller-owned values, never inspected by the resolver
    data: Any = None
    requested_by: Any = None

    @property
    def milliseconds(self) -> int:
        """Duration in milliseconds; 0 when unknown (e.g. live streams)."""
        if not self.duration:
            return 0
        try:
            return time_to_ms(self.duration)
        except ValueError:
            return 0

    def with_data(self, data: Any) -> Song:
        """Return a copy of this song carrying ``data``."""
        return self.model_copy(update={"data": data})

    def __str__(self) -> str:
        return f"{self.name} | {self.author}"


class Playlist(BaseModel):
    """Immutable, provider-agnostic representation of a resolved collection.

    A playlist always holds at least one song; resolving a collection to
    nothing is reported as an error rather than as an empty playlist.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    author: str
    url: NonEmptyStr
    type: PlaylistType = PlaylistType.PLAYLIST
    songs: list[Song] = Field(min_length=1)

    @property
    def total_milliseconds(self) -> int:
        return sum(song.milliseconds for song in self.songs)

    def __len__(self) -> int:
        return len(self.songs)

    def __str__(self) -> str:
        return f"{self.name} | {self.author}"


# ── Apple Music scrape results ─────────────────────────────────────


class ScrapedTrack(BaseModel):
    """Artist/title pair lifted from an Apple Music page, before re-search."""

    model_config = ConfigDict(frozen=True)

    artist: str
    title: NonEmptyStr

    @property
    def search_query(self) -> str:
        return f"{self.artist} - {self.title}"


class ScrapedTrackList(BaseModel):
    """Scraped tracks in document order."""

    tracks: list[ScrapedTrack] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.tracks)

    def add_track(self, track: ScrapedTrack) -> None:
        self.tracks.append(track)


class AppleTrackResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[AppleLinkKind.SONG] = AppleLinkKind.SONG
    track: ScrapedTrack


class AppleTrackListResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[AppleLinkKind.ALBUM] = AppleLinkKind.ALBUM
    track_list: ScrapedTrackList


AppleExtraction = Annotated[
    AppleTrackResult | AppleTrackListResult,
    Field(discriminator="kind"),
]
"""Apple page extraction result, discriminated by ``kind``."""
