"""Pydantic models for yt-dlp data transformation and configuration.

These are infrastructure-specific models for parsing external yt-dlp data
and configuring yt-dlp options.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from discord_music_resolver.domain.shared.types import NonEmptyStr, NonNegativeInt, PositiveInt

DEFAULT_SOCKET_TIMEOUT: Final[int] = 10
LIVE_STATUSES: Final[frozenset[str]] = frozenset({"is_live", "was_live", "post_live"})


def _coerce_non_negative_int(v: Any) -> int | None:
    if v is None:
        return None
    try:
        val = int(v)
        return val if val >= 0 else None
    except (TypeError, ValueError):
        return None


# ── Pydantic models for yt-dlp data ────────────────────────────────────


class ThumbnailInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    url: NonEmptyStr | None = None


class YtDlpEntryInfo(BaseModel):
    """One entry of a flat (metadata-only) search or playlist extraction.

    Extra fields from yt-dlp are silently ignored. Before-validators coerce
    garbage from external yt-dlp data gracefully.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: NonEmptyStr | None = None
    ie_key: NonEmptyStr | None = None
    url: NonEmptyStr | None = None
    title: str = ""
    duration: NonNegativeInt | None = None
    channel: NonEmptyStr | None = None
    uploader: NonEmptyStr | None = None
    live_status: NonEmptyStr | None = None
    thumbnail: NonEmptyStr | None = None
    thumbnails: list[ThumbnailInfo] = Field(default_factory=list)

    @field_validator(
        "id", "ie_key", "url", "channel", "uploader", "live_status", "thumbnail",
        mode="before",
    )
    @classmethod
    def _coerce_empty_to_none(cls, v: Any) -> str | None:
        """Convert empty / whitespace-only / non-string values to None."""
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, v: Any) -> int | None:
        """yt-dlp reports float seconds; keep whole non-negative seconds only."""
        return _coerce_non_negative_int(v)

    @field_validator("thumbnails", mode="before")
    @classmethod
    def _coerce_thumbnails(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [t for t in v if isinstance(t, dict)]

    @property
    def author(self) -> str:
        return self.channel or self.uploader or ""

    @property
    def best_thumbnail(self) -> str | None:
        """yt-dlp orders thumbnails worst to best."""
        for thumbnail in reversed(self.thumbnails):
            if thumbnail.url:
                return thumbnail.url
        return self.thumbnail

    @property
    def is_live(self) -> bool:
        return self.live_status == "is_live"

    @property
    def is_live_content(self) -> bool:
        """True for streams that are, or were, broadcast live."""
        return self.live_status in LIVE_STATUSES


class YtDlpPlaylistInfo(BaseModel):
    """Flat playlist extraction result."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    channel: NonEmptyStr | None = None
    uploader: NonEmptyStr | None = None
    playlist_count: NonNegativeInt | None = None
    entries: list[YtDlpEntryInfo] = Field(default_factory=list)

    @field_validator("channel", "uploader", mode="before")
    @classmethod
    def _coerce_empty_to_none(cls, v: Any) -> str | None:
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("playlist_count", mode="before")
    @classmethod
    def _coerce_count(cls, v: Any) -> int | None:
        return _coerce_non_negative_int(v)

    @field_validator("entries", mode="before")
    @classmethod
    def _drop_missing_entries(cls, v: Any) -> list[Any]:
        """Unavailable videos come back as None entries."""
        if v is None:
            return []
        return [e for e in v if isinstance(e, dict)]


# ── yt-dlp option models ───────────────────────────────────────────────


class YtDlpOpts(BaseModel):
    """Typed yt-dlp configuration options passed to YoutubeDL."""

    model_config = ConfigDict(frozen=True)

    quiet: bool = True
    no_warnings: bool = True
    noprogress: bool = True
    noplaylist: bool = True
    # A failed lookup fails the operation; yt-dlp must not retry on its own.
    retries: NonNegativeInt = 0
    extractor_retries: NonNegativeInt = 0
    socket_timeout: PositiveInt = DEFAULT_SOCKET_TIMEOUT
    skip_download: bool = True
    extract_flat: NonEmptyStr | bool = False
    playlist_items: NonEmptyStr | None = None
    playlistend: PositiveInt | None = None

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
