"""VideoBackend implementation using yt-dlp.

yt-dlp is synchronous, so every extraction runs in ``asyncio.to_thread``.
Playlists are extracted flat and page-wise via ``playlist_items`` ranges.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final, cast

from yt_dlp import YoutubeDL

from discord_music_resolver.application.interfaces.video_backend import (
    PlaylistDetails,
    PlaylistVideo,
    PlaylistVideos,
    VideoBackend,
    VideoDetails,
)
from discord_music_resolver.config.settings import YouTubeSettings
from discord_music_resolver.domain.shared.messages import LogTemplates
from discord_music_resolver.infrastructure.youtube.models import (
    YtDlpEntryInfo,
    YtDlpOpts,
    YtDlpPlaylistInfo,
)

logger = logging.getLogger(__name__)

MIX_PREFIX: Final[str] = "RD"
VIDEO_ID_LENGTH: Final[int] = 11


def _to_playlist_video(entry: YtDlpEntryInfo) -> PlaylistVideo | None:
    if not entry.id:
        return None
    return PlaylistVideo(
        id=entry.id,
        title=entry.title,
        duration=entry.duration,
        channel_name=entry.author,
        is_live=entry.is_live,
        thumbnail=entry.best_thumbnail,
    )


class YtDlpPlaylistVideos(PlaylistVideos):
    """Playlist videos loaded one ``page_size`` range at a time."""

    def __init__(
        self,
        backend: YtDlpVideoBackend,
        url: str,
        first_page: list[YtDlpEntryInfo],
        total: int,
    ) -> None:
        self._backend = backend
        self._url = url
        self._total = total
        self._position = len(first_page)
        self._items = [v for e in first_page if (v := _to_playlist_video(e)) is not None]

    @property
    def items(self) -> list[PlaylistVideo]:
        return self._items

    async def next(self, pages: int = 1) -> list[PlaylistVideo]:
        added: list[PlaylistVideo] = []
        for _ in range(pages):
            if self._position >= self._total:
                break
            start = self._position + 1
            end = self._position + self._backend.page_size
            info = await asyncio.to_thread(self._backend._extract_playlist_sync, self._url, start, end)
            if info is None or not info.entries:
                break

            # Position counts raw entries so unusable ones do not shift later ranges.
            self._position += len(info.entries)
            page = [v for e in info.entries if (v := _to_playlist_video(e)) is not None]
            logger.debug(LogTemplates.YOUTUBE_PLAYLIST_PAGE, self._url, start, end, len(page))
            self._items.extend(page)
            added.extend(page)
        return added


class YtDlpVideoBackend(VideoBackend):

    def __init__(self, settings: YouTubeSettings | None = None, opts: YtDlpOpts | None = None) -> None:
        self._settings = settings or YouTubeSettings()
        self._opts = opts or YtDlpOpts()

    @property
    def page_size(self) -> int:
        return self._settings.page_size

    def watch_url(self, video_id: str) -> str:
        return f"{self._settings.base_url}/watch?v={video_id}"

    def playlist_url(self, playlist_id: str) -> str:
        """Mixes are only reachable through a watch URL of their seed video."""
        seed = playlist_id[len(MIX_PREFIX):]
        if playlist_id.startswith(MIX_PREFIX) and len(seed) == VIDEO_ID_LENGTH:
            return f"{self.watch_url(seed)}&list={playlist_id}"
        return f"{self._settings.base_url}/playlist?list={playlist_id}"

    async def get_video(self, video_id: str) -> VideoDetails | None:
        info = await asyncio.to_thread(self._extract_video_sync, self.watch_url(video_id))
        if info is None:
            return None
        return VideoDetails(
            title=info.title,
            duration=info.duration,
            channel_name=info.author,
            is_live_content=info.is_live_content,
            thumbnail=info.best_thumbnail,
        )

    async def get_playlist(self, playlist_id: str) -> PlaylistDetails | None:
        is_mix = playlist_id.startswith(MIX_PREFIX)
        url = self.playlist_url(playlist_id)
        info = await asyncio.to_thread(self._extract_playlist_sync, url, 1, self.page_size)
        if info is None:
            return None

        total = len(info.entries) if is_mix else (info.playlist_count or len(info.entries))
        return PlaylistDetails(
            title=info.title,
            channel_name=None if is_mix else (info.channel or info.uploader or ""),
            video_count=total,
            is_mix=is_mix,
            videos=YtDlpPlaylistVideos(self, url, info.entries, total),
        )

    def _extract_video_sync(self, url: str) -> YtDlpEntryInfo | None:
        try:
            with YoutubeDL(params=cast(Any, self._opts.to_params())) as ydl:
                data = ydl.extract_info(url, download=False, process=False)
        except Exception:
            logger.exception(LogTemplates.YTDLP_FAILED_EXTRACT_INFO, url)
            return None
        if not isinstance(data, dict):
            return None
        return YtDlpEntryInfo.model_validate(data)

    def _extract_playlist_sync(self, url: str, start: int, end: int) -> YtDlpPlaylistInfo | None:
        opts = self._opts.model_copy(
            update={
                "extract_flat": "in_playlist",
                "noplaylist": False,
                "playlist_items": f"{start}-{end}",
            }
        )
        try:
            with YoutubeDL(params=cast(Any, opts.to_params())) as ydl:
                data = ydl.extract_info(url, download=False)
        except Exception:
            logger.exception(LogTemplates.YTDLP_FAILED_EXTRACT_INFO, url)
            return None
        if not isinstance(data, dict):
            return None
        return YtDlpPlaylistInfo.model_validate(data)
