"""
Unit Tests for SpotifyEmbedClient

Tests for:
- Mapping Spotify URLs and URIs onto embed pages
- __NEXT_DATA__ entity parsing
- Track previews and collection data
- Failures raised as ExtractionError
"""

import json

import pytest
from conftest import FakePageFetcher

from discord_music_resolver.domain.shared.exceptions import ExtractionError
from discord_music_resolver.infrastructure.spotify.embed_client import (
    SpotifyEmbedClient,
    to_embed_url,
)

TRACK_EMBED = "https://open.spotify.com/embed/track/4cOdK2wGLETKBW3PvgPWqT"
ALBUM_EMBED = "https://open.spotify.com/embed/album/4uLU6hMCjMI75M1A2tKUQC"


def _embed_page(entity: dict) -> str:
    data = {"props": {"pageProps": {"state": {"data": {"entity": entity}}}}}
    return (
        "<html><body>"
        f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(data)}</script>'
        "</body></html>"
    )


TRACK_ENTITY = {
    "type": "track",
    "name": "Never Gonna Give You Up",
    "artists": [{"name": "Rick Astley", "uri": "spotify:artist:0gxyHStUsqpMadRV0Di1Qt"}],
}

ALBUM_ENTITY = {
    "type": "album",
    "name": "Whenever You Need Somebody",
    "subtitle": "Rick Astley",
    "trackList": [
        {"title": "Never Gonna Give You Up", "subtitle": "Rick Astley"},
        {"title": "Whenever You Need Somebody", "subtitle": "Rick Astley"},
        {"subtitle": "no title"},
    ],
}


# =============================================================================
# URL Mapping
# =============================================================================


class TestToEmbedUrl:
    """Tests for to_embed_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT",
            "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT?si=abc",
            "https://open.spotify.com/intl-de/track/4cOdK2wGLETKBW3PvgPWqT",
            "https://open.spotify.com/embed/track/4cOdK2wGLETKBW3PvgPWqT",
            "https://embed.spotify.com/?uri=spotify:track:4cOdK2wGLETKBW3PvgPWqT",
        ],
    )
    def test_track_forms(self, url):
        """Should normalise every track form to the embed URL."""
        assert to_embed_url(url) == TRACK_EMBED

    def test_playlist(self):
        url = "https://open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M"
        assert to_embed_url(url) == "https://open.spotify.com/embed/playlist/37i9dQZF1DXcBWIGoYBM5M"

    def test_unrecognized(self):
        """Should raise ExtractionError for non-Spotify URLs."""
        with pytest.raises(ExtractionError):
            to_embed_url("https://example.com/track/1")


# =============================================================================
# Entity Parsing
# =============================================================================


class TestParseEntity:
    """Tests for parse_entity."""

    def test_returns_entity(self):
        assert SpotifyEmbedClient.parse_entity(_embed_page(TRACK_ENTITY)) == TRACK_ENTITY

    @pytest.mark.parametrize(
        "page",
        [
            "<html></html>",
            '<script id="__NEXT_DATA__">{broken</script>',
            '<script id="__NEXT_DATA__">{"props": {}}</script>',
            '<script id="__NEXT_DATA__">{"props": {"pageProps": {"state": {"data": {"entity": []}}}}}</script>',
        ],
    )
    def test_invalid_pages(self, page):
        """Should raise ExtractionError when the entity cannot be read."""
        with pytest.raises(ExtractionError):
            SpotifyEmbedClient.parse_entity(page, TRACK_EMBED)


# =============================================================================
# Backend Operations
# =============================================================================


class TestSpotifyEmbedClient:
    """Tests for get_preview and get_data."""

    @pytest.mark.asyncio
    async def test_get_preview(self):
        """Should return title and joined artists."""
        fetcher = FakePageFetcher({TRACK_EMBED: _embed_page(TRACK_ENTITY)})
        preview = await SpotifyEmbedClient(fetcher).get_preview(
            "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT?si=abc"
        )

        assert fetcher.requested == [TRACK_EMBED]
        assert preview.title == "Never Gonna Give You Up"
        assert preview.artist == "Rick Astley"
        assert preview.search_query == "Rick Astley - Never Gonna Give You Up"

    @pytest.mark.asyncio
    async def test_get_preview_multiple_artists(self):
        """Should join several artists with commas."""
        entity = dict(TRACK_ENTITY, artists=[{"name": "A"}, {"name": "B"}])
        fetcher = FakePageFetcher({TRACK_EMBED: _embed_page(entity)})

        preview = await SpotifyEmbedClient(fetcher).get_preview(TRACK_EMBED)

        assert preview.artist == "A, B"

    @pytest.mark.asyncio
    async def test_get_data(self):
        """Should return type, name, owner and titled tracks."""
        fetcher = FakePageFetcher({ALBUM_EMBED: _embed_page(ALBUM_ENTITY)})
        data = await SpotifyEmbedClient(fetcher).get_data(
            "https://open.spotify.com/album/4uLU6hMCjMI75M1A2tKUQC"
        )

        assert data.type == "album"
        assert data.name == "Whenever You Need Somebody"
        assert data.subtitle == "Rick Astley"
        assert [t.search_query for t in data.track_list] == [
            "Rick Astley - Never Gonna Give You Up",
            "Rick Astley - Whenever You Need Somebody",
        ]

    @pytest.mark.asyncio
    async def test_unfetchable_page(self):
        """Should raise ExtractionError when the embed page is unavailable."""
        with pytest.raises(ExtractionError):
            await SpotifyEmbedClient(FakePageFetcher()).get_preview(TRACK_EMBED)
