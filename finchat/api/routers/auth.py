"""Auth API endpoints.

Routes:
- POST /auth/register - Create a user
- POST /auth/login - Exchange credentials for a session token

Dependencies: finchat.application.services.auth_service
System role: Registration and login HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from finchat.api.deps import get_auth_service
from finchat.api.routers.router_utils import handle_api_errors
from finchat.application.services.auth_service import AuthService
from finchat.models.auth import (
    CredentialsRequest,
    ErrorResponse,
    LoginResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_api_errors("Error registering user")
async def register(
    request: CredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Register a new user.

    Raises:
        ValidationError(400): Username or password length out of range
        ConflictError(400): Username already exists
        InternalError(500): Hashing or storage failed
    """
    await auth_service.register(request.username, request.password)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@handle_api_errors("Error logging in user")
async def login(
    request: CredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Log in and receive a session token.

    Raises:
        NotFoundError(404): Unknown username
        AuthError(401): Wrong password
        InternalError(500): Hash comparison or signing failed
    """
    token = await auth_service.login(request.username, request.password)
    return LoginResponse(message="Login successful", token=token)
