"""
Authentication service.

Registration and login over the identity store, the password hasher and
the token service.

Dependencies: finchat.boundary.identity, finchat.core.security, fastapi.concurrency
System role: Auth flow orchestration
"""

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool

from finchat.boundary.identity import UserStore
from finchat.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from finchat.core.security import PasswordHasher, TokenService
from finchat.models.user import UserRecord

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 10
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 20


class AuthService:
    """
    Registers users and issues session tokens.

    The store does not enforce uniqueness, so the duplicate check and the
    append run under one lock.
    """

    def __init__(
        self,
        user_store: UserStore,
        hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self.user_store = user_store
        self.hasher = hasher
        self.token_service = token_service
        self._register_lock = asyncio.Lock()

    async def register(self, username: str, password: str) -> UserRecord:
        """
        Register a new user.

        Args:
            username: 3-10 characters, unique
            password: 6-20 characters

        Returns:
            UserRecord: Stored record

        Raises:
            ConflictError: Username already registered
            ValidationError: Username or password length out of range
        """
        self._ensure_available(username)

        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"Username must be between {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters",
                field="username",
            )
        if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
            raise ValidationError(
                f"Password must be between {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters",
                field="password",
            )

        password_hash = await run_in_threadpool(self.hasher.hash, password)

        async with self._register_lock:
            # Another request may have taken the name while we were hashing
            self._ensure_available(username)
            record = UserRecord(username=username, password_hash=password_hash)
            self.user_store.append(record)

        logger.info(f"{__name__}:register - User registered", extra={"username": username})
        return record

    async def login(self, username: str, password: str) -> str:
        """
        Check credentials and issue a session token.

        Returns:
            str: Signed session token

        Raises:
            NotFoundError: Unknown username
            AuthError: Wrong password
        """
        record = self.user_store.find_by_username(username)
        if record is None:
            raise NotFoundError("User not found", {"username": username})

        valid = await run_in_threadpool(self.hasher.verify, password, record.password_hash)
        if not valid:
            logger.info(f"{__name__}:login - Invalid password", extra={"username": username})
            raise AuthError("Invalid password", {"username": username})

        token = self.token_service.sign(username)
        logger.info(f"{__name__}:login - Login successful", extra={"username": username})
        return token

    def _ensure_available(self, username: str) -> None:
        if self.user_store.find_by_username(username) is not None:
            raise ConflictError("Username already exists", {"username": username})
