"""
Web page scraper.

Fetches a page over HTTP and reduces its <body> to a single line of text.

Dependencies: httpx, bs4
System role: Source text collaborator for the retrieval pipeline
"""

import logging

import httpx
from bs4 import BeautifulSoup

from finchat.core.exceptions import ScrapeError

logger = logging.getLogger(__name__)


def extract_body_text(html: str) -> str:
    """
    Extract visible body text with whitespace runs collapsed to single spaces.

    Args:
        html: Raw HTML document

    Returns:
        str: Body text, empty when the document has no body
    """
    soup = BeautifulSoup(html, "html.parser")
    body = soup.body
    if body is None:
        return ""
    for tag in body(["script", "style", "noscript"]):
        tag.decompose()
    return " ".join(body.get_text(" ").split())


class PageScraper:
    """Fetches source pages with a shared async HTTP client."""

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize scraper.

        Args:
            timeout_seconds: Per-request timeout
            user_agent: Optional User-Agent header
            client: Preconfigured client (tests, connection sharing)
        """
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            headers=headers,
            follow_redirects=True,
        )

    async def fetch_text(self, url: str) -> str:
        """
        Fetch a page and return its body text.

        Raises:
            ScrapeError: On network failure or non-2xx status
        """
        logger.info(f"{__name__}:fetch_text - Fetching {url}")
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ScrapeError(
                message=f"Failed to fetch {url}",
                operation="fetch",
                details={"url": url, "error": str(e)},
            ) from e

        text = extract_body_text(response.text)
        logger.info(f"{__name__}:fetch_text - Extracted {len(text)} characters from {url}")
        return text

    async def aclose(self) -> None:
        await self._client.aclose()
