"""
LLM configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Chat model configuration for fragment filtering and answer synthesis
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """OpenAI chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(
        default=True,
        description="Run LLM filtering and synthesis when an OpenAI key is configured",
    )
    api_key: str = Field(default="", description="OpenAI API key for chat completions")
    model: str = Field(default="gpt-3.5-turbo", description="OpenAI chat model ID")

    filter_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    filter_max_tokens: int = Field(default=300, gt=0)
    answer_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    answer_max_tokens: int = Field(default=500, gt=0)
