"""Option models accepted by the search and resolver services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ...domain.shared.types import NonEmptyStr, PositiveInt


class SearchOptions(BaseModel):
    """Facet choices and caller metadata for a single-track resolution.

    Facet values are matched against the backend's option labels without
    regard to case: ``upload_date`` must occur in an ``Upload date`` label
    (``"hour"``, ``"today"``, ``"week"``, ``"month"``, ``"year"``), ``duration``
    must start a ``Duration`` label (``"under"``, ``"over"``, ``"4 - 20"``) and
    ``sort_by`` must occur in a ``Sort by`` label (``"date"``, ``"view count"``,
    ``"rating"``). ``"relevance"`` is the backend default and is never re-applied.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    upload_date: NonEmptyStr | None = None
    duration: NonEmptyStr | None = None
    sort_by: NonEmptyStr | None = "relevance"

    # Honour ``t=`` offsets in YouTube links
    timecode: bool = False

    requested_by: Any = None
    data: Any = None


class PlaylistOptions(SearchOptions):
    """Options for collection resolution; ``max_songs=None`` means no cap."""

    max_songs: PositiveInt | None = None
    shuffle: bool = False
