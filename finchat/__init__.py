"""FinChat API: authenticated finance Q&A over freshly scraped market pages."""

__version__ = "0.1.0"
