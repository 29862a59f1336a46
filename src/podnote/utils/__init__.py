"""Utility functions and helpers for Podnote."""

from podnote.utils.errors import (
    ConfigError,
    InvalidConfigError,
    MalformedDocumentError,
    NetworkError,
    NoActiveDocumentError,
    NoteExistsError,
    OutputError,
    PipelineBusyError,
    PodnoteError,
    SecurityError,
    UnsupportedServiceError,
)
from podnote.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodnoteError",
    "ConfigError",
    "InvalidConfigError",
    "UnsupportedServiceError",
    "NetworkError",
    "MalformedDocumentError",
    "OutputError",
    "NoActiveDocumentError",
    "NoteExistsError",
    "SecurityError",
    "PipelineBusyError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
