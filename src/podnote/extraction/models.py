"""Data models for extracted episode metadata and rendered notes."""

from pydantic import BaseModel, ConfigDict, Field


class PodcastMetadata(BaseModel):
    """Metadata pulled from a podcast episode page.

    Every field is required and must be non-empty, so a record missing any
    value cannot be constructed.

    Example:
        >>> metadata = PodcastMetadata(
        ...     title="Ep 1",
        ...     description="Desc",
        ...     image_url="http://img/1.png",
        ...     source_url="https://open.spotify.com/episode/abc123",
        ...     retrieved_at="07-11-2025 14:05",
        ... )
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Episode title")
    description: str = Field(
        ..., min_length=1, description="Episode description (may contain markup)"
    )
    image_url: str = Field(..., min_length=1, description="Artwork URL")
    source_url: str = Field(..., min_length=1, description="URL the page was requested from")
    retrieved_at: str = Field(
        ..., min_length=1, description="Retrieval time formatted as DD-MM-YYYY HH:MM"
    )


class RenderedNote(BaseModel):
    """Final rendered output handed to a single sink."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Rendered note body")
    suggested_title: str = Field(..., description="Episode title")
    file_name: str = Field("", description="Sanitized file name without extension")
