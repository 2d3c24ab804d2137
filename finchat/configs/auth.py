"""
Authentication configuration settings.

Signing secret and token lifetime for session tokens, bcrypt cost factor
for password hashing.

Dependencies: pydantic, pydantic_settings
System role: Credential services configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Token signing and password hashing configuration."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    secret: str = Field(default="", description="HMAC secret used to sign session tokens")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    token_expires_minutes: int = Field(
        default=60,
        description="Session token lifetime in minutes",
        gt=0,
    )
    bcrypt_rounds: int = Field(
        default=10,
        description="bcrypt cost factor for password hashes",
        ge=4,
        le=31,
    )
