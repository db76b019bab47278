"""Apple Music infrastructure - page scraping."""

from discord_music_resolver.infrastructure.apple.page_extractor import AppleMusicPageExtractor

__all__ = ["AppleMusicPageExtractor"]
