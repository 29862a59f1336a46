"""Service resolution, page fetching and document parsing."""

from podnote.services.document import DocumentTree, Element, parse_document
from podnote.services.fetcher import PageFetcher
from podnote.services.resolver import (
    SERVICE_HOSTS,
    PodcastService,
    ResolvedRequest,
    resolve_url,
)

__all__ = [
    "PodcastService",
    "ResolvedRequest",
    "SERVICE_HOSTS",
    "resolve_url",
    "PageFetcher",
    "DocumentTree",
    "Element",
    "parse_document",
]
