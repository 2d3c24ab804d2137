"""
Health check and welcome endpoints.

Routes: GET /, GET /health

System role: Liveness HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from finchat.models.auth import MessageResponse


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])
root_router = APIRouter(tags=["health"])


@root_router.get("/", response_model=MessageResponse)
async def welcome() -> MessageResponse:
    return MessageResponse(message="Welcome to the FinChat API!")


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")
