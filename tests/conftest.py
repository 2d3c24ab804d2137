"""
Shared test fixtures and configuration for entire test suite.

Provides: seeded user store, credential services, stubbed pipeline collaborators
Dependencies: pytest, bcrypt, finchat
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from finchat.boundary.chat_log import ChatLog
from finchat.boundary.identity import InMemoryUserStore
from finchat.core.security import PasswordHasher, TokenService
from finchat.models.user import UserRecord

TEST_SECRET = "test-signing-secret"
ADMIN_PASSWORD = "admin123"
USER_PASSWORD = "user1234"


@pytest.fixture(scope="session")
def hasher() -> PasswordHasher:
    """Fast bcrypt hasher (minimum cost factor)."""
    return PasswordHasher(rounds=4)


@pytest.fixture(scope="session")
def seeded_records(hasher: PasswordHasher) -> list[UserRecord]:
    """Two pre-registered users, hashed once per session."""
    return [
        UserRecord(username="Admin", password_hash=hasher.hash(ADMIN_PASSWORD)),
        UserRecord(username="User", password_hash=hasher.hash(USER_PASSWORD)),
    ]


@pytest.fixture
def user_store(seeded_records: list[UserRecord]) -> InMemoryUserStore:
    """User store holding Admin and User."""
    return InMemoryUserStore(seeded_records)


@pytest.fixture
def chat_log() -> ChatLog:
    return ChatLog()


@pytest.fixture
def token_service() -> TokenService:
    """Token service with a test secret."""
    return TokenService(secret=TEST_SECRET)


@pytest.fixture
def mock_scraper() -> AsyncMock:
    """Scraper returning fixed page text."""
    scraper = AsyncMock()
    scraper.fetch_text = AsyncMock(return_value="Mock financial data from investing.com")
    return scraper


@pytest.fixture
def mock_embedder() -> AsyncMock:
    """Embedder returning one fixed vector per chunk."""
    embedder = AsyncMock()
    embedder.embed_chunks = AsyncMock(
        side_effect=lambda chunks: [[0.1, 0.2] for _ in chunks]
    )
    embedder.embed_query = AsyncMock(return_value=[0.5, 0.6])
    return embedder


@pytest.fixture
def mock_vector_store() -> AsyncMock:
    """Vector store whose search returns two fixed fragments."""
    from finchat.models.chat import Fragment

    store = AsyncMock()
    store.upsert = AsyncMock()
    store.clear = AsyncMock()
    store.query = AsyncMock(return_value=[
        Fragment(chunk_id="chunk-0", text="Relevant financial info 1", score=0.91),
        Fragment(chunk_id="chunk-1", text="Relevant financial info 2", score=0.87),
    ])
    return store


@pytest.fixture
def mock_post_processor() -> MagicMock:
    """LLM post-processor that keeps every fragment and answers with a fixed text."""
    processor = MagicMock()
    processor.filter_relevant = AsyncMock(side_effect=lambda fragments, topic: list(fragments))
    processor.synthesize = AsyncMock(return_value="Mock OpenAI response")
    return processor


@pytest.fixture
def admin_password() -> str:
    """Plaintext password of the seeded Admin user."""
    return ADMIN_PASSWORD
