"""
Password hashing and session token services.

Wraps bcrypt for password hashes and PyJWT for signed, expiring session
tokens. Both are treated as opaque collaborators by the auth flow.

Dependencies: bcrypt, jwt (PyJWT), finchat.configs
System role: Credential primitives for registration, login and the access gate
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from finchat.core.exceptions import InternalError, InvalidCredentialError

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """bcrypt password hasher."""

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash."""
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            logger.warning(f"{__name__}:verify - Stored hash is not a valid bcrypt hash")
            return False


class TokenService:
    """
    Signs and verifies session tokens.

    Tokens are JWTs carrying a ``username`` claim plus ``iat`` and ``exp``.
    Validity depends only on signature and expiry; there is no revocation.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def sign(self, username: str) -> str:
        """
        Issue a token bound to a username.

        Args:
            username: Username to bind

        Returns:
            str: Encoded JWT

        Raises:
            InternalError: When no signing secret is configured
        """
        if not self._secret:
            raise InternalError("Token signing secret is not configured")

        now = datetime.now(timezone.utc)
        claims = {
            "username": username,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Verify signature and expiry and return the token claims.

        Raises:
            InvalidCredentialError: When the token is malformed, forged, expired,
                lacks a username claim, or no secret is configured
        """
        if not self._secret:
            raise InvalidCredentialError({"reason": "signing secret not configured"})

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "username"]},
            )
        except jwt.PyJWTError as e:
            logger.info(f"{__name__}:verify - Token rejected: {type(e).__name__}")
            raise InvalidCredentialError({"reason": type(e).__name__}) from e

        return claims
