"""Tests for the page scraper."""

import httpx
import pytest

from finchat.boundary.web import PageScraper, extract_body_text
from finchat.core.exceptions import ScrapeError


def _scraper_for(handler) -> PageScraper:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PageScraper(client=client)


class TestExtractBodyText:
    """Test HTML body text extraction."""

    def test_collapses_whitespace(self) -> None:
        html = "<html><body><h1>Title</h1>\n\n   <p>Content    here</p>  </body></html>"

        assert extract_body_text(html) == "Title Content here"

    def test_ignores_head_and_scripts(self) -> None:
        html = (
            "<html><head><title>Page</title></head>"
            "<body><script>var x = 1;</script><p>S&amp;P 500 up 1.2%</p>"
            "<style>p {color: red}</style></body></html>"
        )

        assert extract_body_text(html) == "S&P 500 up 1.2%"

    def test_empty_body(self) -> None:
        assert extract_body_text("<html><body></body></html>") == ""


class TestPageScraper:
    """Test fetching pages over HTTP."""

    @pytest.mark.asyncio
    async def test_fetch_text_returns_body_text(self) -> None:
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, text="<html><body><p>Dow   Jones</p></body></html>")

        scraper = _scraper_for(handler)

        text = await scraper.fetch_text("https://example.com/markets")

        assert text == "Dow Jones"
        assert requested == ["https://example.com/markets"]
        await scraper.aclose()

    @pytest.mark.asyncio
    async def test_http_error_status_raises_scrape_error(self) -> None:
        scraper = _scraper_for(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(ScrapeError) as exc_info:
            await scraper.fetch_text("https://example.com/down")

        assert exc_info.value.details["url"] == "https://example.com/down"
        assert exc_info.value.details["operation"] == "fetch"

    @pytest.mark.asyncio
    async def test_network_error_raises_scrape_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        scraper = _scraper_for(handler)

        with pytest.raises(ScrapeError, match="Failed to fetch"):
            await scraper.fetch_text("https://invalid-url.example")
