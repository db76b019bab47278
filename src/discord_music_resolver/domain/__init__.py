# ruff: noqa: N999
"""
Domain Layer

Contains pure resolution logic organized by bounded contexts:
- shared/: Exceptions, constrained types, duration and shuffle helpers
- music/: Songs, playlists, scraped tracks and link classification
"""

from discord_music_resolver.domain.music import Playlist, Provider, Song
from discord_music_resolver.domain.shared.exceptions import DomainError

__all__ = [
    "Song",
    "Playlist",
    "Provider",
    "DomainError",
]
