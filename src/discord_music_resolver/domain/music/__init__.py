"""
Music Bounded Context

Normalized songs and playlists, scraped Apple Music tracks, and link classification.
"""

from discord_music_resolver.domain.music.entities import (
    AppleExtraction,
    AppleTrackListResult,
    AppleTrackResult,
    Playlist,
    ScrapedTrack,
    ScrapedTrackList,
    Song,
)
from discord_music_resolver.domain.music.link_classifier import (
    apple_link_kind,
    extract_playlist_id,
    extract_video_id,
    extract_video_timecode,
    is_collection_link,
    is_single_item_link,
)
from discord_music_resolver.domain.music.value_objects import AppleLinkKind, PlaylistType, Provider

__all__ = [
    # Entities
    "Song",
    "Playlist",
    "ScrapedTrack",
    "ScrapedTrackList",
    "AppleTrackResult",
    "AppleTrackListResult",
    "AppleExtraction",
    # Value Objects
    "Provider",
    "AppleLinkKind",
    "PlaylistType",
    # Link Classification
    "is_single_item_link",
    "is_collection_link",
    "extract_video_id",
    "extract_video_timecode",
    "extract_playlist_id",
    "apple_link_kind",
]
