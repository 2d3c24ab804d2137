"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, dotenv, finchat.api, finchat.observability, finchat.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finchat import __version__
from finchat.api.deps import get_service_cache
from finchat.api.errors import register_exception_handlers
from finchat.api.routers import auth_router, chat_router, health_router, root_router
from finchat.configs import get_settings
from finchat.observability import configure_logging
from finchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    if not settings.auth.secret:
        logger.warning("AUTH_SECRET is not set; login and protected routes will fail")

    yield

    # Shutdown
    cache = get_service_cache()
    await cache.aclose()
    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="FinChat API",
        description="Authenticated finance Q&A over freshly scraped market pages",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(chat_router)

    return app


# Populate os.environ from .env for the SDKs before settings are read
load_dotenv()

app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "finchat.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
