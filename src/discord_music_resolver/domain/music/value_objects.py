"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from enum import StrEnum


class Provider(StrEnum):
    """Music service a link was classified as belonging to."""

    YOUTUBE = "youtube"
    SPOTIFY = "spotify"
    APPLE = "apple"
    NONE = "none"


class AppleLinkKind(StrEnum):
    """What an Apple Music page is asked to yield: one song or the whole list."""

    SONG = "song"
    ALBUM = "album"


class PlaylistType(StrEnum):
    PLAYLIST = "playlist"
    ALBUM = "album"
