"""Resolver Application Service - turns user input into songs and playlists."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ...domain.music.entities import Playlist, Song
from ...domain.music.link_classifier import (
    extract_playlist_id,
    extract_video_id,
    extract_video_timecode,
    is_collection_link,
    is_single_item_link,
)
from ...domain.music.value_objects import AppleLinkKind, PlaylistType, Provider
from ...domain.shared.collection_utils import shuffle
from ...domain.shared.duration_utils import ms_to_time
from ...domain.shared.exceptions import (
    InvalidAppleLinkError,
    InvalidPlaylistLinkError,
    InvalidSpotifyLinkError,
    SearchFailedError,
)
from ...domain.shared.messages import LogTemplates
from ...domain.shared.types import PositiveInt
from .resolver_models import PlaylistOptions, SearchOptions

if TYPE_CHECKING:
    from ...config.settings import YouTubeSettings
    from ..interfaces.metadata_backend import SpotifyMetadataBackend
    from ..interfaces.page_extractor import ApplePageExtractor
    from ..interfaces.video_backend import PlaylistVideo, VideoBackend
    from .search_service import SearchService

logger = logging.getLogger(__name__)

APPLE_PLAYLIST_NAME = "Apple Playlist"
APPLE_PLAYLIST_AUTHOR = "N/A"


class TrackResolverService:
    """Classifies input, dispatches it to the matching provider and normalizes the result.

    ``link`` and ``playlist`` are strict and raise one of the resolution errors
    when a recognised link yields nothing. ``best`` falls back to a text search
    when the input is not a track link.
    """

    def __init__(
        self,
        *,
        search_service: SearchService,
        apple_extractor: ApplePageExtractor,
        spotify_backend: SpotifyMetadataBackend,
        video_backend: VideoBackend,
        youtube_settings: YouTubeSettings,
    ) -> None:
        self._search = search_service
        self._apple = apple_extractor
        self._spotify = spotify_backend
        self._videos = video_backend
        self._youtube = youtube_settings

    async def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        limit: PositiveInt | None = None,
    ) -> list[Song]:
        return await self._search.search(query, options, limit)

    # ── Single tracks ──────────────────────────────────────────────────

    async def link(self, text: str, options: SearchOptions | None = None) -> Song | None:
        """Resolve a single-track link; None when ``text`` is not one."""
        options = options or SearchOptions()
        is_song, provider = is_single_item_link(text)
        if not is_song:
            return None

        logger.debug(LogTemplates.RESOLVE_LINK, provider, text)

        if provider is Provider.APPLE:
            return await self._apple_song(text, options)
        if provider is Provider.SPOTIFY:
            return await self._spotify_song(text, options)
        if provider is Provider.YOUTUBE:
            return await self._youtube_song(text, options)
        return None

    async def best(self, query: Song | str, options: SearchOptions | None = None) -> Song | None:
        """Resolve a link, or else return the first usable search hit.

        Songs pass through unchanged. None means neither path produced a song.
        """
        if isinstance(query, Song):
            return query

        options = options or SearchOptions()
        song = await self.link(query, options)
        if song is not None:
            return song

        logger.debug(LogTemplates.RESOLVE_FALLBACK_SEARCH, query)
        candidates = await self._search.search(query, options, self._search.default_limit)
        return next((candidate for candidate in candidates if candidate is not None), None)

    async def _apple_song(self, url: str, options: SearchOptions) -> Song:
        try:
            result = await self._apple.extract(url, AppleLinkKind.SONG)
        except Exception as exc:
            raise InvalidAppleLinkError(url) from exc
        if result is None or result.kind is not AppleLinkKind.SONG:
            raise InvalidAppleLinkError(url)

        try:
            songs = await self._search.search(result.track.search_query, options)
        except SearchFailedError as exc:
            raise InvalidAppleLinkError(url) from exc
        if not songs:
            raise InvalidAppleLinkError(url)
        return songs[0]

    async def _spotify_song(self, url: str, options: SearchOptions) -> Song:
        try:
            preview = await self._spotify.get_preview(url)
            songs = await self._search.search(preview.search_query, options)
        except Exception as exc:
            raise InvalidSpotifyLinkError(url) from exc
        if not songs:
            raise InvalidSpotifyLinkError(url)
        return songs[0]

    async def _youtube_song(self, url: str, options: SearchOptions) -> Song:
        video_id = extract_video_id(url)
        if not video_id:
            raise SearchFailedError(url)

        try:
            video = await self._videos.get_video(video_id)
        except Exception as exc:
            raise SearchFailedError(url) from exc
        if video is None:
            raise SearchFailedError(url)

        timecode = extract_video_timecode(url)
        seek_time = int(timecode) * 1000 if options.timecode and timecode else None

        return Song(
            name=video.title,
            url=url,
            duration=ms_to_time((video.duration or 0) * 1000),
            author=video.channel_name,
            is_live=video.is_live_content,
            thumbnail=video.thumbnail,
            seek_time=seek_time,
            requested_by=options.requested_by,
        )

    # ── Collections ────────────────────────────────────────────────────

    async def playlist(
        self, query: Playlist | str, options: PlaylistOptions | None = None
    ) -> Playlist:
        """Resolve an album/playlist link into a non-empty playlist.

        Raises:
            InvalidPlaylistLinkError: If ``query`` is not a collection link, the
                provider fetch fails, or no track could be resolved.
        """
        if isinstance(query, Playlist):
            return query

        options = options or PlaylistOptions()
        is_list, provider = is_collection_link(query)
        if not is_list:
            raise InvalidPlaylistLinkError(query)

        if provider is Provider.APPLE:
            return await self._apple_playlist(query, options)
        if provider is Provider.SPOTIFY:
            return await self._spotify_playlist(query, options)
        if provider is Provider.YOUTUBE:
            return await self._youtube_playlist(query, options)
        raise InvalidPlaylistLinkError(query)

    async def _apple_playlist(self, url: str, options: PlaylistOptions) -> Playlist:
        try:
            result = await self._apple.extract(url, AppleLinkKind.ALBUM)
        except Exception as exc:
            raise InvalidPlaylistLinkError(url) from exc
        if result is None or result.kind is not AppleLinkKind.ALBUM:
            raise InvalidPlaylistLinkError(url)

        tracks = result.track_list.tracks
        songs = await self._resolve_all([track.search_query for track in tracks], options)
        return self._package(
            url,
            options,
            songs,
            source_count=len(tracks),
            name=APPLE_PLAYLIST_NAME,
            author=APPLE_PLAYLIST_AUTHOR,
            playlist_type=PlaylistType.PLAYLIST,
        )

    async def _spotify_playlist(self, url: str, options: PlaylistOptions) -> Playlist:
        try:
            data = await self._spotify.get_data(url)
            playlist_type = PlaylistType(data.type)
        except Exception as exc:
            raise InvalidPlaylistLinkError(url) from exc

        songs = await self._resolve_all([track.search_query for track in data.track_list], options)
        return self._package(
            url,
            options,
            songs,
            source_count=len(data.track_list),
            name=data.name,
            author=data.subtitle,
            playlist_type=playlist_type,
        )

    async def _youtube_playlist(self, url: str, options: PlaylistOptions) -> Playlist:
        playlist_id = extract_playlist_id(url)
        if not playlist_id:
            raise InvalidPlaylistLinkError(url)

        try:
            details = await self._videos.get_playlist(playlist_id)
        except Exception as exc:
            raise InvalidPlaylistLinkError(url) from exc
        if details is None:
            raise InvalidPlaylistLinkError(url)

        limit = options.max_songs
        page_size = self._youtube.page_size
        if (
            not details.is_mix
            and details.video_count > page_size
            and (limit is None or limit > page_size)
        ):
            wanted = details.video_count if limit is None or limit > details.video_count else limit - 1
            pages = wanted // page_size
            logger.info(LogTemplates.RESOLVE_PLAYLIST_PAGINATE, pages, playlist_id, details.video_count)
            try:
                await details.videos.next(pages)
            except Exception as exc:
                raise InvalidPlaylistLinkError(url) from exc

        videos = details.videos.items
        songs = [
            self._video_to_song(video, options)
            for index, video in enumerate(videos)
            if (limit is None or index < limit) and video.title
        ]
        return self._package(
            url,
            options,
            songs,
            source_count=len(videos),
            name=details.title,
            author=details.channel_name or self._youtube.mix_author,
            playlist_type=PlaylistType.PLAYLIST,
        )

    def _video_to_song(self, video: PlaylistVideo, options: PlaylistOptions) -> Song:
        return Song(
            name=video.title,
            url=f"{self._youtube.base_url}/watch?v={video.id}",
            duration=ms_to_time((video.duration or 0) * 1000),
            author=video.channel_name,
            is_live=video.is_live,
            thumbnail=video.thumbnail,
            data=options.data,
            requested_by=options.requested_by,
        )

    async def _resolve_all(self, queries: list[str], options: PlaylistOptions) -> list[Song]:
        """Re-search every query concurrently; failed entries are left out, order is kept."""
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(self._resolve_one(query, index, options))
                for index, query in enumerate(queries)
            ]
        return [song for task in tasks if (song := task.result()) is not None]

    async def _resolve_one(self, query: str, index: int, options: PlaylistOptions) -> Song | None:
        if options.max_songs is not None and index >= options.max_songs:
            return None

        try:
            songs = await self._search.search(query, options)
        except Exception as exc:
            logger.warning(LogTemplates.RESOLVE_NO_CONTRIBUTION, query, exc)
            return None

        if not songs:
            logger.warning(LogTemplates.RESOLVE_NO_CONTRIBUTION, query, "no search results")
            return None
        return songs[0].with_data(options.data)

    @staticmethod
    def _package(
        url: str,
        options: PlaylistOptions,
        songs: list[Song],
        *,
        source_count: int,
        name: str,
        author: str,
        playlist_type: PlaylistType,
    ) -> Playlist:
        if not songs:
            raise InvalidPlaylistLinkError(url)
        if options.shuffle:
            songs = shuffle(songs)

        logger.info(LogTemplates.RESOLVE_PLAYLIST_DONE, playlist_type, name, len(songs), source_count)
        return Playlist(name=name, author=author, url=url, type=playlist_type, songs=songs)
