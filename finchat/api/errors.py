"""
Exception handlers.

Renders every FinChatException as ``{"error": message}`` with the
exception's HTTP status.

Dependencies: fastapi, finchat.core.exceptions
System role: Error response formatting
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finchat.core.exceptions import FinChatException

logger = logging.getLogger(__name__)


async def finchat_exception_handler(request: Request, exc: FinChatException) -> JSONResponse:
    """Render a domain exception as a JSON error body."""
    logger.info(
        f"{request.method} {request.url.path} - {exc.status_code} {type(exc).__name__}",
        extra={"error": exc.message, "details": exc.details},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FinChatException, finchat_exception_handler)
