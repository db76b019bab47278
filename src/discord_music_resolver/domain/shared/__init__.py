"""
Shared Domain Kernel

Contains exceptions, constrained types and helpers shared across the resolver.
"""

from discord_music_resolver.domain.shared.collection_utils import shuffle
from discord_music_resolver.domain.shared.duration_utils import ms_to_time, time_to_ms
from discord_music_resolver.domain.shared.exceptions import (
    DomainError,
    ExtractionError,
    InvalidAppleLinkError,
    InvalidPlaylistLinkError,
    InvalidSpotifyLinkError,
    ResolutionError,
    SearchFailedError,
)

__all__ = [
    "DomainError",
    "ExtractionError",
    "ResolutionError",
    "SearchFailedError",
    "InvalidAppleLinkError",
    "InvalidSpotifyLinkError",
    "InvalidPlaylistLinkError",
    "ms_to_time",
    "time_to_ms",
    "shuffle",
]
