"""Configuration schema models using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from podnote.services.resolver import PodcastService
from podnote.templates.engine import DEFAULT_FILENAME_TEMPLATE, DEFAULT_TEMPLATE


class PodnoteConfig(BaseModel):
    """Persisted Podnote settings.

    Unknown keys in the stored file are ignored and missing keys fall back to
    their defaults.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    podcast_template: str = DEFAULT_TEMPLATE
    file_name: str = DEFAULT_FILENAME_TEMPLATE
    podcast_service: PodcastService = PodcastService.APPLE
    at_cursor: bool = True  # False creates a new note instead
    folder: str = ""  # Prefix inside the vault, e.g. "Podcasts/"
    vault_dir: Path = Field(default=Path("~/notes"))

    @property
    def vault_path(self) -> Path:
        """Vault directory with ``~`` expanded."""
        return self.vault_dir.expanduser()
