"""Metadata extraction from podcast episode pages.

This module provides:
- PodcastMetadata / RenderedNote models
- Per-service extraction strategies
"""

from podnote.extraction.extractors import (
    EXTRACTORS,
    extract_apple,
    extract_metadata,
    extract_open_graph,
    format_retrieved_at,
)
from podnote.extraction.models import PodcastMetadata, RenderedNote

__all__ = [
    "PodcastMetadata",
    "RenderedNote",
    "EXTRACTORS",
    "extract_metadata",
    "extract_open_graph",
    "extract_apple",
    "format_retrieved_at",
]
