"""
Chat pipeline configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Chunking and answer fallback configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Chunking and answer assembly configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1024, description="Characters per chunk", gt=0)
    min_fragment_chars: int = Field(
        default=50,
        description="Filtered fragments this short or shorter are dropped",
        ge=0,
    )
    fallback_fragments: int = Field(
        default=3,
        description="Fragments quoted by the templated fallback answer",
        gt=0,
    )
    fallback_fragment_chars: int = Field(
        default=200,
        description="Truncation length for fragments quoted by the fallback answer",
        gt=0,
    )
