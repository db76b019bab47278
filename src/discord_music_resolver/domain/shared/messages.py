"""Centralized message constants for error messages and log templates."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Resolution Errors (templates)
    RESOLUTION_FAILED = "Could not resolve '{query}'"
    SEARCH_FAILED = "No search results could be produced for '{query}'"
    INVALID_APPLE_LINK = "Could not resolve Apple Music link '{query}'"
    INVALID_SPOTIFY_LINK = "Could not resolve Spotify link '{query}'"
    INVALID_PLAYLIST_LINK = "Could not resolve a playlist from '{query}'"
    EXTRACTION_FAILED = "Could not extract data from {source}"

    # Adapter Errors
    PAGE_UNAVAILABLE = "Page {url} could not be fetched"
    FILTER_URL_FOREIGN = "Filter URL {url} is not a search results page on {base_url}"
    SPOTIFY_URL_UNRECOGNIZED = "'{url}' is not a Spotify track, album or playlist URL"
    SPOTIFY_ENTITY_MISSING = "Spotify embed page for {url} carries no entity"
    YOUTUBE_INITIAL_DATA_MISSING = "No ytInitialData found on {url}"
    YOUTUBE_VIDEO_UNAVAILABLE = "Video {video_id} is unavailable"
    YOUTUBE_PLAYLIST_UNAVAILABLE = "Playlist {playlist_id} is unavailable"

    # Search Filter Errors
    FILTER_FACET_MISSING = "Search filters have no '{facet}' facet"
    FILTER_NO_URL = "Search filter '{name}' has no URL"

    # Duration Errors
    INVALID_DURATION_SEGMENT = "Invalid duration segment {segment!r} in {text!r}"

    # Configuration Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # HTTP
    HTTP_FETCH_FAILED = "GET %s failed: %s"
    HTTP_CLIENT_CLOSED = "HTTP client closed"

    # Apple Music
    APPLE_SERVER_DATA_MISSING = "No serialized server data found on %s"
    APPLE_SERVER_DATA_INVALID = "Serialized server data on %s is not valid JSON: %s"
    APPLE_SECTIONS_MISSING = "Apple payload for %s has no page sections"
    APPLE_TRACKS_EXTRACTED = "Extracted %d track(s) from %s (%s)"

    # Spotify
    SPOTIFY_EMBED_FETCHED = "Fetched Spotify embed %s"

    # YouTube
    YOUTUBE_FILTERS_LOADED = "Loaded %d search filter facet(s) for %r"
    YOUTUBE_SEARCH_EXECUTED = "Search %s returned %d item(s)"
    YOUTUBE_PLAYLIST_PAGE = "Fetched playlist %s items %d-%d (%d returned)"
    YTDLP_FAILED_EXTRACT_INFO = "Failed to extract info from %s"

    # Search Service
    SEARCH_FILTER_FALLBACK = "No '%s' filter matches %r, keeping %r"
    SEARCH_FILTER_APPLIED = "Applied '%s' filter %r"
    SEARCH_FAILED = "Search failed for %r"
    SEARCH_DROPPED_ITEM = "Dropped non-video search result %r (%s)"

    # Resolver Service
    RESOLVE_LINK = "Resolving %s link %s"
    RESOLVE_FALLBACK_SEARCH = "No link match for %r, falling back to search"
    RESOLVE_NO_CONTRIBUTION = "Track %r contributed nothing to playlist: %s"
    RESOLVE_PLAYLIST_DONE = "Resolved %s playlist %r with %d of %d track(s)"
    RESOLVE_PLAYLIST_PAGINATE = "Fetching %d more page(s) of playlist %s (%d videos)"

    # Application
    RESOLVER_STARTING = "Resolving %r (environment=%s)"
    RESOLVER_FAILED = "Resolution failed: %s"
    RESOLVER_INVALID_OPTIONS = "Invalid options: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
