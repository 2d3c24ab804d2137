"""
Authentication request/response schemas.

Dependencies: pydantic
System role: Auth API contracts
"""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Body of register and login requests."""

    username: str = Field(default="", description="Username (3-10 characters)")
    password: str = Field(default="", description="Password (6-20 characters)")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class LoginResponse(BaseModel):
    """Successful login with a session token."""

    message: str
    token: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str
