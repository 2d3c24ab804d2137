"""Application service layer."""

from finchat.application.services.auth_service import AuthService
from finchat.application.services.chat_service import ChatService

__all__ = ["AuthService", "ChatService"]
