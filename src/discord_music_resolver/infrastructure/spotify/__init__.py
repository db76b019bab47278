"""Spotify infrastructure - embed page metadata."""

from discord_music_resolver.infrastructure.spotify.embed_client import SpotifyEmbedClient

__all__ = ["SpotifyEmbedClient"]
