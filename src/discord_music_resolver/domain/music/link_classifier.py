"""Classify user input as a provider link and pull ids out of YouTube URLs.

Each classifier runs its provider patterns in a fixed order (Spotify, then
YouTube, then Apple Music) and reports the first match. Input that matches
nothing classifies as ``(False, Provider.NONE)`` so callers can fall through
to a free-text search.
"""

from __future__ import annotations

import re
from typing import Final

from discord_music_resolver.domain.music.value_objects import AppleLinkKind, Provider

_SPOTIFY_TAIL: Final[str] = r"((\w|-)+)(?:(?=\?)(?:[?&]foo=(\d*)(?=[&#]|$)|(?![?&]foo=)[^#])+)?(?=#|$)"

YOUTUBE_VIDEO_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^((?:https?:)//)?((?:www|m)\.)?((?:youtube\.com|youtu\.be))"
    r"((?!channel)(?!user)/(?:[\w\-]+\?v=|embed/|v/)?)((?!channel)(?!user)[\w\-]+)"
)
YOUTUBE_VIDEO_TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r"(([?]|[&])t=(\d+))")
YOUTUBE_VIDEO_ID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^.*((youtu\.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*"
)
YOUTUBE_PLAYLIST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^((?:https?:)//)?((?:www|m)\.)?((?:youtube\.com)).*(youtu\.be/|list=)([^#&?]*).*"
)
YOUTUBE_PLAYLIST_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"[&?]list=([^&]+)")

SPOTIFY_TRACK_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://(?:embed\.|open\.)(?:spotify\.com/)(?:intl-[\w-]+/)?"
    r"(?:track/|\?uri=spotify:track:)" + _SPOTIFY_TAIL
)
SPOTIFY_COLLECTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://(?:embed\.|open\.)(?:spotify\.com/)(?:intl-[\w-]+/)?"
    r"(?:(album|playlist)/|\?uri=spotify:playlist:)" + _SPOTIFY_TAIL
)

APPLE_SONG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://music\.apple\.com/[a-z]{2}/album/\S+?/\d+?\?i=([0-9]+)"
)
APPLE_COLLECTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://music\.apple\.com/[a-z]{2}/(playlist|album)/"
)
APPLE_SONG_KIND_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://music\.apple\.com/.+?/album/.+?/.+?\?i=([0-9]+)"
)

_SINGLE_ITEM_PATTERNS: Final[tuple[tuple[re.Pattern[str], Provider], ...]] = (
    (SPOTIFY_TRACK_PATTERN, Provider.SPOTIFY),
    (YOUTUBE_VIDEO_PATTERN, Provider.YOUTUBE),
    (APPLE_SONG_PATTERN, Provider.APPLE),
)

_COLLECTION_PATTERNS: Final[tuple[tuple[re.Pattern[str], Provider], ...]] = (
    (SPOTIFY_COLLECTION_PATTERN, Provider.SPOTIFY),
    (YOUTUBE_PLAYLIST_PATTERN, Provider.YOUTUBE),
    (APPLE_COLLECTION_PATTERN, Provider.APPLE),
)


def _classify(
    text: str, patterns: tuple[tuple[re.Pattern[str], Provider], ...]
) -> tuple[bool, Provider]:
    for pattern, provider in patterns:
        if pattern.search(text):
            return True, provider
    return False, Provider.NONE


def is_single_item_link(text: str) -> tuple[bool, Provider]:
    """Check whether ``text`` links to a single track, and on which provider."""
    return _classify(text, _SINGLE_ITEM_PATTERNS)


def is_collection_link(text: str) -> tuple[bool, Provider]:
    """Check whether ``text`` links to a playlist or album, and on which provider."""
    return _classify(text, _COLLECTION_PATTERNS)


def extract_video_id(url: str) -> str | None:
    """Get the video id from a YouTube link.

    >>> extract_video_id("https://youtu.be/dQw4w9WgXcQ?t=43")
    'dQw4w9WgXcQ'
    """
    match = YOUTUBE_VIDEO_ID_PATTERN.search(url)
    return match.group(7) if match else None


def extract_video_timecode(url: str) -> str | None:
    """Get the ``t=`` start offset (seconds) from a YouTube link."""
    match = YOUTUBE_VIDEO_TIME_PATTERN.search(url)
    return match.group(3) if match else None


def extract_playlist_id(url: str) -> str | None:
    """Get the ``list=`` id from a YouTube playlist or mix link."""
    match = YOUTUBE_PLAYLIST_ID_PATTERN.search(url)
    return match.group(1) if match else None


def apple_link_kind(url: str) -> AppleLinkKind:
    """Album links that select a track with ``?i=`` are songs; the rest are albums."""
    if APPLE_SONG_KIND_PATTERN.search(url):
        return AppleLinkKind.SONG
    return AppleLinkKind.ALBUM
