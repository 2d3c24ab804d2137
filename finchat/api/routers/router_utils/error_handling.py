"""
Route error handling utilities.

Provides a decorator that keeps client errors (4xx) as they are and
collapses everything else into a single generic InternalError, so a
caller cannot tell a scrape failure from a vector store failure.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from finchat.core.exceptions import FinChatException, InternalError
from finchat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_api_errors(fallback_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping server-side failures to a generic message.

    Args:
        fallback_message: Error text returned for any 5xx failure

    Returns:
        Decorator for async route handlers
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except FinChatException as e:
                if e.status_code < 500:
                    raise
                log_exception_with_context(
                    logger,
                    f"{func.__name__} failed",
                    e,
                    details=e.details,
                )
                raise InternalError(fallback_message) from e

            except Exception as e:
                log_exception_with_context(logger, f"Unexpected failure in {func.__name__}", e)
                raise InternalError(fallback_message) from e

        return wrapper  # type: ignore

    return decorator
