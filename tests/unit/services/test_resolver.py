"""Tests for podcast service resolution."""

import pytest

from podnote.services.resolver import PodcastService, ResolvedRequest, resolve_url
from podnote.utils.errors import UnsupportedServiceError


class TestResolveUrl:
    """Tests for resolve_url."""

    def test_spotify_url(self) -> None:
        """Should resolve Spotify episode URLs."""
        request = resolve_url("https://open.spotify.com/episode/abc123")

        assert request.service == PodcastService.SPOTIFY
        assert request.host == "open.spotify.com"
        assert request.path == "/episode/abc123"

    def test_apple_url_keeps_query_string(self) -> None:
        """Path should include the query string untouched."""
        request = resolve_url("https://podcasts.apple.com/us/podcast/ep/id123?i=1000")

        assert request.service == PodcastService.APPLE
        assert request.host == "podcasts.apple.com"
        assert request.path == "/us/podcast/ep/id123?i=1000"

    @pytest.mark.parametrize(
        "url",
        [
            "https://open.spotify.com/episode/1",
            "http://open.spotify.com/episode/1?si=xyz",
            "open.spotify.com/episode/1",
        ],
    )
    def test_path_is_everything_after_host(self, url: str) -> None:
        """Path should equal the substring following the host."""
        request = resolve_url(url)

        assert request.path == url.split("open.spotify.com", 1)[1]

    def test_host_without_path(self) -> None:
        """A bare host resolves to an empty path."""
        request = resolve_url("https://open.spotify.com")

        assert request.path == ""

    def test_first_matching_host_wins(self) -> None:
        """Spotify is checked before Apple when both appear."""
        url = "https://open.spotify.com/episode/1?ref=podcasts.apple.com"

        request = resolve_url(url)

        assert request.service == PodcastService.SPOTIFY
        assert request.path == "/episode/1?ref=podcasts.apple.com"

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=abc",
            "https://example.com/podcast/episode-1",
            "",
            "spotify.com/episode/1",
        ],
    )
    def test_unknown_host_rejected(self, url: str) -> None:
        """URLs without a known host raise UnsupportedServiceError."""
        with pytest.raises(UnsupportedServiceError) as exc_info:
            resolve_url(url)

        assert exc_info.value.url == url


class TestResolvedRequest:
    """Tests for ResolvedRequest model."""

    def test_is_immutable(self) -> None:
        """Resolved requests cannot be modified."""
        request = ResolvedRequest(
            service=PodcastService.APPLE, host="podcasts.apple.com", path="/x"
        )

        with pytest.raises(ValueError):
            request.path = "/y"

    def test_service_values(self) -> None:
        """Service identifiers serialize to their plain names."""
        assert PodcastService("apple") is PodcastService.APPLE
        assert PodcastService.SPOTIFY.value == "spotify"
