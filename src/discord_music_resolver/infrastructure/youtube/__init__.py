"""YouTube infrastructure - faceted search and yt-dlp lookups."""

from discord_music_resolver.infrastructure.youtube.search_backend import YouTubeSearchBackend
from discord_music_resolver.infrastructure.youtube.video_backend import (
    YtDlpPlaylistVideos,
    YtDlpVideoBackend,
)

__all__ = ["YouTubeSearchBackend", "YtDlpPlaylistVideos", "YtDlpVideoBackend"]
