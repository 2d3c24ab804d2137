"""Web page fetching."""

from finchat.boundary.web.scraper import PageScraper, extract_body_text

__all__ = ["PageScraper", "extract_body_text"]
