"""Port interface for extracting track lists from Apple Music pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from discord_music_resolver.domain.shared.types import HttpUrlStr

if TYPE_CHECKING:
    from ...domain.music.entities import AppleExtraction
    from ...domain.music.value_objects import AppleLinkKind


class ApplePageExtractor(ABC):
    """Interface for scraping artist/title pairs out of an Apple Music page."""

    @abstractmethod
    async def extract(
        self, url: HttpUrlStr, kind: AppleLinkKind | None = None
    ) -> AppleExtraction | None:
        """Extract one track (song links) or every track (album/playlist links).

        Returns None when the page could not be fetched or holds no tracks.
        """
        ...
