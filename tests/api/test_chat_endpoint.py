"""
Test suite for chat API endpoints.

Tests GET /chat/can-access and POST /chat with FastAPI TestClient.
Covers the access gate, unknown users, the pipeline response shape and
the generic error for pipeline failures.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finchat.api.deps import get_chat_service, get_token_service
from finchat.api.deps.dependencies import ServiceCache
from finchat.application.services.chat_service import ChatService
from finchat.boundary.chat_log import ChatLog
from finchat.boundary.identity import InMemoryUserStore
from finchat.configs import Settings
from finchat.configs.llm import LLMSettings
from finchat.configs.vector_store import EmbeddingSettings, VectorStoreSettings
from finchat.core.exceptions import LLMError, ScrapeError, VectorStoreError
from finchat.core.security import TokenService
from finchat.main import create_app


@pytest.fixture
def chat_service(
    user_store: InMemoryUserStore,
    chat_log: ChatLog,
    mock_scraper: AsyncMock,
    mock_embedder: AsyncMock,
    mock_vector_store: AsyncMock,
    mock_post_processor: MagicMock,
) -> ChatService:
    """Chat service over stubbed collaborators."""
    return ChatService(
        user_store=user_store,
        chat_log=chat_log,
        scraper=mock_scraper,
        embedder=mock_embedder,
        vector_store=mock_vector_store,
        post_processor=mock_post_processor,
        source_urls=["https://www.investing.com/markets/united-states"],
    )


@pytest.fixture
def app(chat_service: ChatService, token_service: TokenService) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    app.dependency_overrides[get_token_service] = lambda: token_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


def _headers(token_service: TokenService, username: str = "Admin") -> dict[str, str]:
    return {"x-auth-token": token_service.sign(username)}


class TestAccessGate:
    """Token checks shared by every chat route."""

    @pytest.mark.parametrize(
        "method,path",
        [("get", "/chat/can-access"), ("post", "/chat")],
    )
    def test_missing_token(self, client: TestClient, method: str, path: str) -> None:
        response = client.request(method, path, json={"question": "q"})

        assert response.status_code == 401
        assert response.json() == {"error": "No token provided"}

    def test_empty_token(self, client: TestClient) -> None:
        response = client.get("/chat/can-access", headers={"x-auth-token": ""})

        assert response.status_code == 401

    def test_invalid_token(self, client: TestClient) -> None:
        response = client.get("/chat/can-access", headers={"x-auth-token": "invalid.jwt.token"})

        assert response.status_code == 403
        assert response.json() == {"error": "Failed to authenticate token"}

    def test_expired_token(self, client: TestClient) -> None:
        expired = TokenService(
            secret="test-signing-secret",
            expires_in=timedelta(seconds=-10),
        ).sign("Admin")

        response = client.get("/chat/can-access", headers={"x-auth-token": expired})

        assert response.status_code == 403

    def test_token_from_other_secret(self, client: TestClient) -> None:
        forged = TokenService(secret="someone-else").sign("Admin")

        response = client.post("/chat", headers={"x-auth-token": forged}, json={"question": "q"})

        assert response.status_code == 403


class TestCanAccess:
    """GET /chat/can-access."""

    def test_known_user(self, client: TestClient, token_service: TokenService) -> None:
        response = client.get("/chat/can-access", headers=_headers(token_service))

        assert response.status_code == 200
        assert response.json() == {"message": "The user can access the chat", "chat": []}

    def test_valid_token_for_unknown_user(self, client: TestClient, token_service: TokenService) -> None:
        response = client.get("/chat/can-access", headers=_headers(token_service, "ghost"))

        assert response.status_code == 400
        assert response.json() == {"error": "Username doesn't exists"}

    def test_reads_only_the_token_users_log(self, client: TestClient, token_service: TokenService) -> None:
        client.post("/chat", headers=_headers(token_service, "User"), json={"question": "Private?"})

        response = client.get(
            "/chat/can-access",
            params={"username": "User"},
            headers=_headers(token_service, "Admin"),
        )

        assert response.status_code == 200
        assert response.json()["chat"] == []

    def test_returns_previous_exchanges(self, client: TestClient, token_service: TokenService) -> None:
        client.post("/chat", headers=_headers(token_service), json={"question": "Market trends?"})

        response = client.get("/chat/can-access", headers=_headers(token_service))

        chat = response.json()["chat"]
        assert len(chat) == 1
        assert chat[0]["question"] == "Market trends?"
        assert chat[0]["answer"] == "Mock OpenAI response"
        assert "createdAt" in chat[0]

    def test_unexpected_error(
        self, app: FastAPI, client: TestClient, token_service: TokenService
    ) -> None:
        broken = MagicMock()
        broken.can_access.side_effect = RuntimeError("Database error")
        app.dependency_overrides[get_chat_service] = lambda: broken

        response = client.get("/chat/can-access", headers=_headers(token_service))

        assert response.status_code == 500
        assert response.json() == {"error": "Error testing Access"}


class TestChat:
    """POST /chat."""

    def test_chat_returns_answer_sources_and_counts(
        self, client: TestClient, token_service: TokenService
    ) -> None:
        response = client.post(
            "/chat",
            headers=_headers(token_service),
            json={"username": "Admin", "question": "What are the market trends?"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "chat": "Mock OpenAI response",
            "sources": ["Relevant financial info 1", "Relevant financial info 2"],
            "originalChunks": 2,
            "validatedChunks": 2,
            "aiProcessed": True,
        }

    def test_username_defaults_to_token(
        self, client: TestClient, token_service: TokenService, chat_log: ChatLog
    ) -> None:
        response = client.post("/chat", headers=_headers(token_service, "User"), json={"question": "Dow?"})

        assert response.status_code == 200
        assert [entry.question for entry in chat_log.for_user("User")] == ["Dow?"]

    def test_missing_question_is_empty(
        self, client: TestClient, token_service: TokenService, mock_embedder: AsyncMock
    ) -> None:
        response = client.post("/chat", headers=_headers(token_service), json={"username": "Admin"})

        assert response.status_code == 200
        mock_embedder.embed_query.assert_awaited_once_with("")

    def test_unknown_user(
        self, client: TestClient, token_service: TokenService, mock_scraper: AsyncMock
    ) -> None:
        response = client.post(
            "/chat",
            headers=_headers(token_service),
            json={"username": "NonExistentUser", "question": "Market trends?"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Username doesn't exists"}
        mock_scraper.fetch_text.assert_not_awaited()

    def test_scrape_failure_is_generic(
        self, client: TestClient, token_service: TokenService, mock_scraper: AsyncMock
    ) -> None:
        mock_scraper.fetch_text.side_effect = ScrapeError("Failed to scrape website")

        response = client.post("/chat", headers=_headers(token_service), json={"question": "Market data?"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error testing Access"}

    def test_vector_store_failure_is_generic(
        self, client: TestClient, token_service: TokenService, mock_vector_store: AsyncMock
    ) -> None:
        mock_vector_store.query.side_effect = VectorStoreError("Pinecone search failed")

        response = client.post("/chat", headers=_headers(token_service), json={"question": "Market data?"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error testing Access"}

    def test_llm_fallback_reports_not_ai_processed(
        self,
        client: TestClient,
        token_service: TokenService,
        mock_post_processor: MagicMock,
    ) -> None:
        mock_post_processor.synthesize.side_effect = LLMError("down")

        response = client.post("/chat", headers=_headers(token_service), json={"question": "Market data?"})

        assert response.status_code == 200
        body = response.json()
        assert body["aiProcessed"] is False
        assert "Relevant financial info 1" in body["chat"]


class TestDefaultWiring:
    """Routes served by the real service factories with no API keys configured."""

    @pytest.fixture
    def wired_client(
        self,
        monkeypatch: pytest.MonkeyPatch,
        user_store: InMemoryUserStore,
        token_service: TokenService,
        mock_scraper: AsyncMock,
    ):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("PINECONE_API_KEY", raising=False)
        cache = ServiceCache(
            Settings(
                vector_store=VectorStoreSettings(api_key=""),
                embedding=EmbeddingSettings(api_key=""),
                llm=LLMSettings(api_key=""),
            )
        )
        cache._user_store = user_store
        cache._scraper = mock_scraper

        app = create_app()
        app.dependency_overrides[get_token_service] = lambda: token_service
        with patch("finchat.api.deps.dependencies._service_cache", cache):
            yield TestClient(app)

    def test_can_access_needs_no_external_clients(
        self, wired_client: TestClient, token_service: TokenService
    ) -> None:
        response = wired_client.get("/chat/can-access", headers=_headers(token_service))

        assert response.status_code == 200
        assert response.json() == {"message": "The user can access the chat", "chat": []}

    def test_missing_credentials_give_generic_json_error(
        self, wired_client: TestClient, token_service: TokenService
    ) -> None:
        response = wired_client.post("/chat", headers=_headers(token_service), json={"question": "Dow?"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error testing Access"}

    def test_unknown_user_still_rejected(self, wired_client: TestClient, token_service: TokenService) -> None:
        response = wired_client.get("/chat/can-access", headers=_headers(token_service, "ghost"))

        assert response.status_code == 400
        assert response.json() == {"error": "Username doesn't exists"}
