"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: finchat.configs, finchat.application, finchat.boundary, finchat.core
System role: DI container for service injection
"""

import logging
import os
from datetime import timedelta

from finchat.application.services import AuthService, ChatService
from finchat.boundary.chat_log import ChatLog
from finchat.boundary.identity import InMemoryUserStore
from finchat.configs import Settings, get_settings
from finchat.core.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._user_store = None
        self._chat_log = None
        self._hasher = None
        self._token_service = None
        self._auth_service = None
        self._scraper = None
        self._embedder = None
        self._vector_store = None
        self._post_processor = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_store(self) -> InMemoryUserStore:
        """Get the process-wide user store."""
        if self._user_store is None:
            self._user_store = InMemoryUserStore()
        return self._user_store

    @property
    def chat_log(self) -> ChatLog:
        """Get the process-wide chat log."""
        if self._chat_log is None:
            self._chat_log = ChatLog()
        return self._chat_log

    @property
    def hasher(self) -> PasswordHasher:
        if self._hasher is None:
            self._hasher = PasswordHasher(rounds=self.settings.auth.bcrypt_rounds)
        return self._hasher

    @property
    def token_service(self) -> TokenService:
        """Get cached token service."""
        if self._token_service is None:
            auth = self.settings.auth
            self._token_service = TokenService(
                secret=auth.secret,
                algorithm=auth.algorithm,
                expires_in=timedelta(minutes=auth.token_expires_minutes),
            )
        return self._token_service

    @property
    def auth_service(self) -> AuthService:
        """Get the process-wide auth service, so its registration lock spans requests."""
        if self._auth_service is None:
            self._auth_service = AuthService(
                user_store=self.user_store,
                hasher=self.hasher,
                token_service=self.token_service,
            )
        return self._auth_service

    @property
    def scraper(self):
        """Get cached page scraper."""
        if self._scraper is None:
            from finchat.boundary.web import PageScraper

            self._scraper = PageScraper(
                timeout_seconds=self.settings.scraper.timeout_seconds,
                user_agent=self.settings.scraper.user_agent,
            )
        return self._scraper

    @property
    def embedder(self):
        """Get cached embedder."""
        if self._embedder is None:
            from finchat.boundary.llm import OpenAIEmbedder

            embedding = self.settings.embedding
            self._embedder = OpenAIEmbedder(
                api_key=embedding.api_key,
                model=embedding.model,
                dimensions=embedding.dimensions,
            )
        return self._embedder

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from finchat.boundary.vdb import PineconeVectorStore

            config = self.settings.vector_store
            self._vector_store = PineconeVectorStore(
                api_key=config.api_key,
                index_name=config.index_name,
                namespace=config.namespace,
            )
        return self._vector_store

    @property
    def post_processor(self):
        """Get cached LLM post-processor, None when disabled or no OpenAI key is set."""
        llm = self.settings.llm
        if not llm.enabled:
            return None
        if not (llm.api_key or os.environ.get("OPENAI_API_KEY")):
            logger.info("No OpenAI key for the LLM stage; answers use the templated fallback")
            return None
        if self._post_processor is None:
            from finchat.boundary.llm import FragmentPostProcessor

            self._post_processor = FragmentPostProcessor(
                api_key=llm.api_key,
                model=llm.model,
                min_fragment_chars=self.settings.chat.min_fragment_chars,
                filter_temperature=llm.filter_temperature,
                filter_max_tokens=llm.filter_max_tokens,
                answer_temperature=llm.answer_temperature,
                answer_max_tokens=llm.answer_max_tokens,
            )
        return self._post_processor

    async def aclose(self) -> None:
        """Close network clients that hold connections."""
        if self._scraper is not None:
            await self._scraper.aclose()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._settings = None
        self._user_store = None
        self._chat_log = None
        self._hasher = None
        self._token_service = None
        self._auth_service = None
        self._scraper = None
        self._embedder = None
        self._vector_store = None
        self._post_processor = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_service_cache().settings


def get_token_service() -> TokenService:
    return get_service_cache().token_service


def get_auth_service() -> AuthService:
    """
    Get auth service instance.

    Returns:
        AuthService: Auth service over the shared user store
    """
    return get_service_cache().auth_service


def get_chat_service() -> ChatService:
    """
    Get chat service instance with its external collaborators.

    Returns:
        ChatService: Retrieval orchestrator
    """
    cache = get_service_cache()
    settings = cache.settings
    return ChatService(
        user_store=cache.user_store,
        chat_log=cache.chat_log,
        scraper=cache.scraper,
        embedder=cache.embedder,
        vector_store=cache.vector_store,
        post_processor=cache.post_processor,
        source_urls=settings.scraper.source_urls,
        chunk_size=settings.chat.chunk_size,
        top_k=settings.vector_store.top_k,
        clear_before_upsert=settings.vector_store.clear_before_upsert,
        fallback_fragments=settings.chat.fallback_fragments,
        fallback_fragment_chars=settings.chat.fallback_fragment_chars,
    )
