"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from finchat.configs.auth import AuthSettings
from finchat.configs.base import BaseSettings
from finchat.configs.chat import ChatSettings
from finchat.configs.llm import LLMSettings
from finchat.configs.scraper import ScraperSettings
from finchat.configs.vector_store import EmbeddingSettings, VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    auth: AuthSettings = Field(default_factory=AuthSettings)
    scraper: ScraperSettings = Field(default_factory=ScraperSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from finchat.configs import get_settings
        settings = get_settings()
    """
    return Settings()
