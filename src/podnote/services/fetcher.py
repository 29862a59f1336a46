"""HTTPS page retrieval for episode pages."""

import logging

import httpx

from podnote.utils.errors import NetworkError

logger = logging.getLogger(__name__)

# Podcast sites serve stripped-down pages to unknown clients
USER_AGENT = "Mozilla/5.0"


class PageFetcher:
    """Fetch episode pages over HTTPS.

    Example:
        >>> fetcher = PageFetcher()
        >>> body = await fetcher.fetch_body("open.spotify.com", "/episode/abc123")
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx transport, mainly for tests
        """
        self.timeout = timeout
        self.transport = transport

    async def fetch_body(self, host: str, path: str) -> str:
        """GET ``https://{host}{path}`` and return the full body as text.

        Args:
            host: Host name, e.g. ``podcasts.apple.com``
            path: Path and query string, passed through unmodified

        Returns:
            Response body decoded as UTF-8

        Raises:
            NetworkError: On transport failure or an error status code
        """
        url = f"https://{host}{path}"
        logger.debug(f"Fetching {url}")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{host} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

        return response.content.decode("utf-8", errors="replace")
