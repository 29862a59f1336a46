"""Shared fixtures for Podnote tests."""

from datetime import datetime
from pathlib import Path

import pytest

from podnote.config.schema import PodnoteConfig
from podnote.extraction.models import PodcastMetadata

SPOTIFY_URL = "https://open.spotify.com/episode/abc123"

SPOTIFY_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta property="og:title" content="Ep 1">
  <meta property="og:description" content="Desc">
  <meta property="og:image" content="http://img/1.png">
</head>
<body></body>
</html>
"""

APPLE_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta property="og:title" content="Apple Ep">
</head>
<body>
  <section class="product-hero-desc__section l-row">
    <p>First <b>bold</b> paragraph</p>
    <p>Second paragraph</p>
  </section>
  <picture>
    <source class="we-artwork__source" srcset="https://is1.example/art-268.webp 268w, https://is1.example/art-536.webp 536w" type="image/webp">
  </picture>
</body>
</html>
"""


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed retrieval time."""
    return datetime(2025, 3, 7, 9, 5)


@pytest.fixture
def sample_metadata() -> PodcastMetadata:
    """Fully populated metadata."""
    return PodcastMetadata(
        title="Ep 1",
        description="Desc",
        image_url="http://img/1.png",
        source_url=SPOTIFY_URL,
        retrieved_at="07-03-2025 09:05",
    )


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty notes vault."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def config(vault_dir: Path) -> PodnoteConfig:
    """Config pointing at the temporary vault."""
    return PodnoteConfig(vault_dir=vault_dir)


@pytest.fixture
def spotify_html() -> str:
    """Spotify episode page with all Open Graph tags."""
    return SPOTIFY_HTML


@pytest.fixture
def apple_html() -> str:
    """Apple Podcasts episode page with description and artwork."""
    return APPLE_HTML
