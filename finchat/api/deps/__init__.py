"""API-specific dependencies."""

# Re-export common dependencies
from .auth import AuthContext, require_auth
from .dependencies import (
    get_auth_service,
    get_chat_service,
    get_service_cache,
    get_settings_dependency,
    get_token_service,
)

__all__ = [
    "AuthContext",
    "get_auth_service",
    "get_chat_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_token_service",
    "require_auth",
]
