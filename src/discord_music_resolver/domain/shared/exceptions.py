"""Base exception classes for domain-level errors."""

from __future__ import annotations

from discord_music_resolver.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ExtractionError(DomainError):
    """Raised when a provider payload could not be fetched or parsed."""

    def __init__(self, source: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.EXTRACTION_FAILED.format(source=source)
        super().__init__(msg, code="EXTRACTION_FAILED")
        self.source = source


class ResolutionError(DomainError):
    """Base for failures that prevent a query from producing any usable result."""

    default_message: str = ErrorMessages.RESOLUTION_FAILED
    default_code: str = "RESOLUTION_FAILED"

    def __init__(self, query: str, message: str | None = None) -> None:
        super().__init__(message or self.default_message.format(query=query), code=self.default_code)
        self.query = query


class SearchFailedError(ResolutionError):
    """The search backend or its filter chain failed, or a required id was missing."""

    default_message = ErrorMessages.SEARCH_FAILED
    default_code = "SEARCH_FAILED"


class InvalidAppleLinkError(ResolutionError):
    default_message = ErrorMessages.INVALID_APPLE_LINK
    default_code = "INVALID_APPLE_LINK"


class InvalidSpotifyLinkError(ResolutionError):
    default_message = ErrorMessages.INVALID_SPOTIFY_LINK
    default_code = "INVALID_SPOTIFY_LINK"


class InvalidPlaylistLinkError(ResolutionError):
    """Collection classification, fetch or per-item resolution produced nothing."""

    default_message = ErrorMessages.INVALID_PLAYLIST_LINK
    default_code = "INVALID_PLAYLIST_LINK"
