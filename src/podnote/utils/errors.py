"""Custom exceptions for Podnote."""


class PodnoteError(Exception):
    """Base exception for all Podnote errors."""

    pass


class ConfigError(PodnoteError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class UnsupportedServiceError(PodnoteError):
    """URL does not belong to a known podcast service."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No supported podcast service found in URL: {url}")
        self.url = url


class NetworkError(PodnoteError):
    """Transport-level failure while fetching a page."""

    pass


class MalformedDocumentError(PodnoteError):
    """Expected metadata element or attribute is missing from a page."""

    def __init__(self, field: str, detail: str = "") -> None:
        message = f"Could not extract '{field}' from document"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.field = field


class OutputError(PodnoteError):
    """Errors while delivering a rendered note."""

    pass


class NoActiveDocumentError(OutputError):
    """Insert-at-cursor requested without an active document."""

    pass


class NoteExistsError(OutputError):
    """A note with the target path already exists."""

    pass


class SecurityError(OutputError):
    """Target path resolves outside the notes vault."""

    pass


class PipelineBusyError(PodnoteError):
    """An extraction run is already in flight."""

    pass
