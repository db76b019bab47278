"""Port interface and payload models for faceted text search backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from discord_music_resolver.domain.shared.types import NonEmptyStr, PositiveInt


class SearchFilter(BaseModel):
    """One selectable option of a search facet (e.g. ``Type`` -> ``Video``).

    ``url`` re-runs the search with this option applied; it is None for the
    option that is already active.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None
    active: bool = False


FilterGroups = dict[str, dict[str, SearchFilter]]
"""Facet name -> option label -> filter."""


class RawSearchItem(BaseModel):
    """A single unprocessed search result as reported by the backend."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    title: str = ""
    url: str = ""
    duration: str | None = None
    author_name: str = ""
    is_live: bool = False
    thumbnail_url: str | None = None


class SearchBackend(ABC):
    """Interface for search engines exposing facet filters as chained URLs."""

    @abstractmethod
    async def get_filters(self, query: NonEmptyStr) -> FilterGroups:
        """Return the facets offered for a plain text query.

        The query is always searched as text, even when it looks like a URL.
        """
        ...

    @abstractmethod
    async def refine(self, filter_url: NonEmptyStr) -> FilterGroups:
        """Return the facets offered once the filter behind ``filter_url`` is applied.

        Only URLs produced by a previous ``get_filters``/``refine`` call are accepted.
        """
        ...

    @abstractmethod
    async def execute(self, filter_url: NonEmptyStr, limit: PositiveInt) -> list[RawSearchItem]:
        """Run the search behind ``filter_url`` and return at most ``limit`` items in rank order."""
        ...
