"""Chat API endpoints.

Routes:
- GET /chat/can-access - Check the token's user may chat and return their chat log
- POST /chat - Answer a finance question from freshly scraped sources

Both routes sit behind the x-auth-token access gate.

Dependencies: finchat.application.services.chat_service, finchat.api.deps
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from finchat.api.deps import AuthContext, get_chat_service, require_auth
from finchat.api.routers.router_utils import handle_api_errors
from finchat.application.services.chat_service import ChatService
from finchat.models.auth import ErrorResponse
from finchat.models.chat import CanAccessResponse, ChatOutcome, ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/can-access", response_model=CanAccessResponse, responses=ERROR_RESPONSES)
@handle_api_errors("Error testing Access")
async def can_access(
    auth: AuthContext = Depends(require_auth),
    chat_service: ChatService = Depends(get_chat_service),
) -> CanAccessResponse:
    """
    Confirm the token's user can use the chat and return their chat log.

    Raises:
        UnknownUserError(400): User is not registered
    """
    chat = chat_service.can_access(auth.username)
    return CanAccessResponse(message="The user can access the chat", chat=chat)


@router.post("", response_model=ChatOutcome, responses=ERROR_RESPONSES)
@handle_api_errors("Error testing Access")
async def chat(
    request: ChatRequest,
    auth: AuthContext = Depends(require_auth),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatOutcome:
    """
    Answer a question grounded in the scraped finance pages.

    Flow:
    1. Resolve the asking user (body username, else the token's)
    2. Run the retrieval pipeline through ChatService
    3. Return answer, sources and fragment counts

    Raises:
        UnknownUserError(400): User is not registered
        InternalError(500): Any scraping, embedding or vector store failure
    """
    username = request.username if request.username is not None else auth.username
    logger.info(f"{__name__}:chat - Question from username={username}")
    return await chat_service.answer(username, request.question)
