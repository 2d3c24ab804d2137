"""
Access gate dependency.

Verifies the ``x-auth-token`` header on every protected request and binds
the token's username to the request. No state survives between requests.

Dependencies: fastapi, finchat.core.security
System role: Authentication gate for chat routes
"""

from dataclasses import dataclass, field
from typing import Any

from fastapi import Depends, Header

from finchat.api.deps.dependencies import get_token_service
from finchat.core.exceptions import NoCredentialError
from finchat.core.security import TokenService


@dataclass(frozen=True)
class AuthContext:
    """Identity attached to an authenticated request."""

    username: str
    claims: dict[str, Any] = field(default_factory=dict)


async def require_auth(
    x_auth_token: str | None = Header(default=None),
    token_service: TokenService = Depends(get_token_service),
) -> AuthContext:
    """
    Verify the bearer token.

    Raises:
        NoCredentialError: Header missing or empty (401)
        InvalidCredentialError: Bad signature, expired or malformed (403)
    """
    if not x_auth_token:
        raise NoCredentialError()

    claims = token_service.verify(x_auth_token)
    return AuthContext(username=claims["username"], claims=claims)
