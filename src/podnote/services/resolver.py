"""Map episode URLs to the podcast service that hosts them."""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from podnote.utils.errors import UnsupportedServiceError

logger = logging.getLogger(__name__)


class PodcastService(str, Enum):
    """Supported podcast hosting services."""

    APPLE = "apple"
    SPOTIFY = "spotify"


# Checked in order; the first host found in the URL wins
SERVICE_HOSTS: tuple[tuple[str, PodcastService], ...] = (
    ("open.spotify.com", PodcastService.SPOTIFY),
    ("podcasts.apple.com", PodcastService.APPLE),
)


class ResolvedRequest(BaseModel):
    """Where to fetch an episode page from and how to read it."""

    model_config = ConfigDict(frozen=True)

    service: PodcastService
    host: str
    path: str


def resolve_url(url: str) -> ResolvedRequest:
    """Classify a URL by podcast service.

    The path is everything after the host substring, passed through
    untouched (leading slash and query string included).

    Args:
        url: Episode URL as entered by the user

    Returns:
        ResolvedRequest for the first matching host

    Raises:
        UnsupportedServiceError: If no known host appears in the URL
    """
    for host, service in SERVICE_HOSTS:
        index = url.find(host)
        if index != -1:
            path = url[index + len(host):]
            logger.debug(f"Resolved {url} to {service.value} (path={path!r})")
            return ResolvedRequest(service=service, host=host, path=path)

    raise UnsupportedServiceError(url)
