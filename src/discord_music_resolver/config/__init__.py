"""Configuration - settings and dependency wiring."""

from discord_music_resolver.config.container import Container, create_container
from discord_music_resolver.config.settings import (
    HttpSettings,
    SearchSettings,
    Settings,
    YouTubeSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Container",
    "HttpSettings",
    "SearchSettings",
    "Settings",
    "YouTubeSettings",
    "clear_settings_cache",
    "create_container",
    "get_settings",
]
