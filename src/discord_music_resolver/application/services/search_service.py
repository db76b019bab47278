"""Search Application Service - faceted text search normalized into songs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from ...domain.music.entities import Song
from ...domain.shared.exceptions import ExtractionError, SearchFailedError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ...domain.shared.types import PositiveInt
from .resolver_models import SearchOptions

if TYPE_CHECKING:
    from ...config.settings import SearchSettings
    from ..interfaces.search_backend import FilterGroups, RawSearchItem, SearchBackend, SearchFilter

logger = logging.getLogger(__name__)

TYPE_FACET: Final[str] = "Type"
VIDEO_OPTION: Final[str] = "Video"
UPLOAD_DATE_FACET: Final[str] = "Upload date"
DURATION_FACET: Final[str] = "Duration"
SORT_BY_FACET: Final[str] = "Sort by"
DEFAULT_SORT: Final[str] = "relevance"
VIDEO_ITEM_TYPE: Final[str] = "video"

LabelMatcher = Callable[[str, str], bool]


def _contains(label: str, wanted: str) -> bool:
    return wanted in label


def _starts_with(label: str, wanted: str) -> bool:
    return label.startswith(wanted)


class SearchService:
    """Narrows a text search through the backend's facet chain and maps the hits to songs.

    The chain always starts from ``Type -> Video`` and then optionally applies
    upload date, duration and sort order, each one re-reading the facets of the
    previously selected filter. A facet value that matches no label leaves the
    filter unchanged. Any backend failure surfaces as ``SearchFailedError``.
    """

    def __init__(self, *, search_backend: SearchBackend, settings: SearchSettings) -> None:
        self._backend = search_backend
        self._settings = settings

    @property
    def default_limit(self) -> int:
        return self._settings.default_limit

    async def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        limit: PositiveInt | None = None,
    ) -> list[Song]:
        options = options or SearchOptions()
        limit = limit or self._settings.default_limit

        try:
            groups = await self._backend.get_filters(query)
            selected = self._facet(groups, TYPE_FACET)[VIDEO_OPTION]

            if options.upload_date is not None:
                selected = await self._refine(
                    selected, UPLOAD_DATE_FACET, options.upload_date, _contains
                )
            if options.duration is not None:
                selected = await self._refine(
                    selected, DURATION_FACET, options.duration, _starts_with
                )
            if options.sort_by is not None and options.sort_by.lower() != DEFAULT_SORT:
                selected = await self._refine(selected, SORT_BY_FACET, options.sort_by, _contains)

            items = await self._backend.execute(self._url_of(selected), limit)
        except Exception as exc:
            logger.warning(LogTemplates.SEARCH_FAILED, query, exc_info=True)
            raise SearchFailedError(query) from exc

        return self._to_songs(items, options)

    async def _refine(
        self,
        selected: SearchFilter,
        facet: str,
        wanted: str,
        matches: LabelMatcher,
    ) -> SearchFilter:
        groups = await self._backend.refine(self._url_of(selected))
        wanted = wanted.lower()

        for label, candidate in self._facet(groups, facet).items():
            if not matches(label.lower(), wanted):
                continue
            # The active option has no URL; the current filter already applies it.
            if candidate.url is None:
                return selected
            logger.debug(LogTemplates.SEARCH_FILTER_APPLIED, facet, label)
            return candidate

        logger.debug(LogTemplates.SEARCH_FILTER_FALLBACK, facet, wanted, selected.name)
        return selected

    @staticmethod
    def _facet(groups: FilterGroups, facet: str) -> dict[str, SearchFilter]:
        try:
            return groups[facet]
        except KeyError:
            raise ExtractionError(
                facet, ErrorMessages.FILTER_FACET_MISSING.format(facet=facet)
            ) from None

    @staticmethod
    def _url_of(selected: SearchFilter) -> str:
        if not selected.url:
            raise ExtractionError(
                selected.name, ErrorMessages.FILTER_NO_URL.format(name=selected.name)
            )
        return selected.url

    @staticmethod
    def _to_songs(items: list[RawSearchItem], options: SearchOptions) -> list[Song]:
        songs: list[Song] = []
        for item in items:
            if item.type.lower() != VIDEO_ITEM_TYPE or not item.title or not item.url:
                logger.debug(LogTemplates.SEARCH_DROPPED_ITEM, item.title, item.type)
                continue
            songs.append(
                Song(
                    name=item.title,
                    url=item.url,
                    duration=item.duration,
                    author=item.author_name,
                    is_live=item.is_live,
                    thumbnail=item.thumbnail_url,
                    requested_by=options.requested_by,
                )
            )
        return songs
