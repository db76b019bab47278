"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the resolver is defined here once,
so models can simply annotate their fields::

    from discord_music_resolver.domain.shared.types import NonEmptyStr, PositiveInt

    class MyModel(BaseModel):
        name: NonEmptyStr
        limit: PositiveInt
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Domain-specific numeric constraints ─────────────────────────────

DurationMs = Annotated[int, Field(ge=0)]
"""Duration or seek offset in milliseconds."""

SearchLimit = Annotated[int, Field(ge=1, le=100)]
"""Number of search candidates requested from a backend: 1 … 100."""


# ── Settings-specific constraints ──────────────────────────────────

HttpTimeoutS = Annotated[float, Field(gt=0.0, le=120.0)]
"""HTTP request timeout in seconds: (0 … 120]."""

PageSize = Annotated[int, Field(ge=1, le=500)]
"""Items fetched per playlist page: 1 … 500."""
