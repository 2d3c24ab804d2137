import pytest
from fastapi.testclient import TestClient

from finchat.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_welcome(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the FinChat API!"}


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/health")
    assert response.headers["X-Correlation-ID"]
