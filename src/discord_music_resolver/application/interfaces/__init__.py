"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from discord_music_resolver.application.interfaces.metadata_backend import SpotifyMetadataBackend
from discord_music_resolver.application.interfaces.page_extractor import ApplePageExtractor
from discord_music_resolver.application.interfaces.page_fetcher import PageFetcher
from discord_music_resolver.application.interfaces.search_backend import SearchBackend
from discord_music_resolver.application.interfaces.video_backend import VideoBackend

__all__ = [
    "ApplePageExtractor",
    "PageFetcher",
    "SearchBackend",
    "SpotifyMetadataBackend",
    "VideoBackend",
]
