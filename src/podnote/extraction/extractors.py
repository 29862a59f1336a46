"""Per-service metadata extraction strategies.

Each strategy is a pure function over a parsed document. A strategy either
returns a complete PodcastMetadata or raises MalformedDocumentError naming the
first field it could not find.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from podnote.extraction.models import PodcastMetadata
from podnote.services.document import DocumentTree
from podnote.services.resolver import PodcastService
from podnote.utils.errors import MalformedDocumentError

logger = logging.getLogger(__name__)

APPLE_DESCRIPTION_CLASS = "product-hero-desc__section"
APPLE_ARTWORK_CLASS = "we-artwork__source"

Strategy = Callable[[DocumentTree, str, str], PodcastMetadata]


def format_retrieved_at(now: datetime | None = None) -> str:
    """Format a timestamp as ``DD-MM-YYYY HH:MM`` (24-hour, zero-padded)."""
    now = now or datetime.now()
    return f"{now.day:02d}-{now.month:02d}-{now.year:04d} {now.hour:02d}:{now.minute:02d}"


def _meta_content(tree: DocumentTree, prop: str) -> str:
    """Read the content attribute of ``<meta property=prop>``."""
    meta = tree.find_by_attribute("meta", "property", prop)
    if meta is None:
        raise MalformedDocumentError(prop, "meta tag not found")
    content = meta.get("content")
    if not content or not content.strip():
        raise MalformedDocumentError(prop, "meta tag has no content")
    return content


def extract_open_graph(tree: DocumentTree, source_url: str, retrieved_at: str) -> PodcastMetadata:
    """Extract metadata from Open Graph meta tags (Spotify pages)."""
    return PodcastMetadata(
        title=_meta_content(tree, "og:title"),
        description=_meta_content(tree, "og:description"),
        image_url=_meta_content(tree, "og:image"),
        source_url=source_url,
        retrieved_at=retrieved_at,
    )


def extract_apple(tree: DocumentTree, source_url: str, retrieved_at: str) -> PodcastMetadata:
    """Extract metadata from an Apple Podcasts episode page.

    The description is the inner markup of the first paragraph in the hero
    description section. The artwork ``srcset`` holds ``"url descriptor"``
    pairs; only the first URL is kept.
    """
    title = _meta_content(tree, "og:title")

    section = tree.find_by_class(APPLE_DESCRIPTION_CLASS)
    if section is None:
        raise MalformedDocumentError("description", "description section not found")
    paragraph = section.find("p")
    if paragraph is None:
        raise MalformedDocumentError("description", "description paragraph not found")
    description = paragraph.inner_html()
    if not description.strip():
        raise MalformedDocumentError("description", "description paragraph is empty")

    artwork = tree.find_by_class(APPLE_ARTWORK_CLASS)
    if artwork is None:
        raise MalformedDocumentError("image", "artwork element not found")
    srcset = artwork.get("srcset")
    if not srcset or not srcset.split():
        raise MalformedDocumentError("image", "artwork has no srcset")
    image_url = srcset.split()[0]

    return PodcastMetadata(
        title=title,
        description=description,
        image_url=image_url,
        source_url=source_url,
        retrieved_at=retrieved_at,
    )


EXTRACTORS: dict[PodcastService, Strategy] = {
    PodcastService.SPOTIFY: extract_open_graph,
    PodcastService.APPLE: extract_apple,
}


def extract_metadata(
    tree: DocumentTree,
    service: PodcastService,
    source_url: str,
    now: datetime | None = None,
) -> PodcastMetadata:
    """Extract episode metadata using the strategy for ``service``.

    Args:
        tree: Parsed episode page
        service: Service the page belongs to
        source_url: URL the page was requested from
        now: Retrieval time (defaults to the current local time)

    Returns:
        Fully populated PodcastMetadata

    Raises:
        MalformedDocumentError: If any expected element or attribute is missing
    """
    strategy = EXTRACTORS[service]
    metadata = strategy(tree, source_url, format_retrieved_at(now))
    logger.debug(f"Extracted '{metadata.title}' from {service.value} page")
    return metadata
