"""HTTP client for resolving platform redirects."""

import httpx
from typing import Dict, Optional
from urllib.parse import urljoin

from ..config import USER_AGENT, HTTP_TIMEOUT
from ..logging import get_logger

logger = get_logger(__name__)


class FetchClient:
    """Client for single-hop redirect resolution and page fetches via HTTP.

    Transport errors (``httpx.HTTPError``, ``httpx.InvalidURL``) propagate to
    the caller; the redirect followers decide how a failure is reported.
    """

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.client = httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=False,
            transport=transport,
        )

    def resolve_location(self, url: str, headers: Optional[Dict[str, str]] = None) -> Optional[str]:
        """
        Issue one GET without following redirects and read ``Location``.

        Args:
            url: URL to request
            headers: Extra request headers

        Returns:
            Absolute redirect target, or None if the response carries no
            Location header
        """
        response = self.client.get(url, headers=headers, follow_redirects=False)
        location = response.headers.get("location")
        if not location:
            logger.debug(f"No Location header for {url} ({response.status_code})")
            return None

        # Location may be relative to the request URL
        resolved = urljoin(str(response.url), location)
        logger.debug(f"Resolved {url} -> {resolved} ({response.status_code})")
        return resolved

    def fetch_html(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """Fetch a page body, following redirects."""
        response = self.client.get(url, headers=headers, follow_redirects=True)
        logger.debug(f"Fetched {url} -> {response.url} ({response.status_code})")
        return response.text

    def close(self) -> None:
        self.client.close()

    def __del__(self):
        """Close HTTP client on cleanup."""
        if hasattr(self, "client"):
            self.client.close()
