"""Application services orchestrating search backends and provider adapters."""

from discord_music_resolver.application.services.resolver_models import (
    PlaylistOptions,
    SearchOptions,
)
from discord_music_resolver.application.services.resolver_service import TrackResolverService
from discord_music_resolver.application.services.search_service import SearchService

__all__ = [
    "PlaylistOptions",
    "SearchOptions",
    "SearchService",
    "TrackResolverService",
]
