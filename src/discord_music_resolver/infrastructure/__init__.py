"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- HTTP page fetching (httpx)
- Apple Music page scraping (BeautifulSoup)
- Spotify embed metadata
- YouTube search and video lookups (yt-dlp)
"""

from discord_music_resolver.infrastructure.apple.page_extractor import AppleMusicPageExtractor
from discord_music_resolver.infrastructure.http.page_fetcher import HttpxPageFetcher
from discord_music_resolver.infrastructure.spotify.embed_client import SpotifyEmbedClient
from discord_music_resolver.infrastructure.youtube.search_backend import YouTubeSearchBackend
from discord_music_resolver.infrastructure.youtube.video_backend import YtDlpVideoBackend

__all__ = [
    "AppleMusicPageExtractor",
    "HttpxPageFetcher",
    "SpotifyEmbedClient",
    "YouTubeSearchBackend",
    "YtDlpVideoBackend",
]
