"""
Scraper configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Source page configuration for the retrieval pipeline
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScraperSettings(BaseSettings):
    """Source pages scraped on every chat request."""

    model_config = SettingsConfigDict(
        env_prefix="SCRAPER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    source_urls: list[str] = Field(
        default=["https://www.investing.com/markets/united-states"],
        description="Pages fetched in order and concatenated before chunking",
        min_length=1,
    )
    timeout_seconds: float = Field(default=30.0, description="Per-request HTTP timeout")
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; FinChatBot/0.1)",
        description="User-Agent header sent to source pages",
    )
