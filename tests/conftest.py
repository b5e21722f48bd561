"""Shared fixtures: isolated settings, a temp SQLite database and a fake AI client."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from recruitai.core.config import get_settings
from recruitai.core.errors import AIServiceError
from recruitai.main import create_app
from recruitai.services.openai_client import get_ai_client

STRONG_PASSWORD = "Str0ng!Passw0rd"


class FakeAIClient:
    """Stands in for OpenAIClient; replays queued replies and records calls."""

    def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.replies = list(replies or [])
        self.error = error
        self.calls = []

    def complete(self, system_prompt, user_content, model=None, temperature=0.3):
        self.calls.append({
            "system": system_prompt,
            "user": user_content,
            "model": model,
            "temperature": temperature,
        })
        if self.error is not None:
            raise self.error
        if self.replies:
            return self.replies.pop(0)
        return "Generated text"

    def fail_with(self, message: str = "OpenAI error 500: upstream down"):
        self.error = AIServiceError(message)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every test at its own database with rate limiting off."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("RATE_LIMIT_INTERVAL_MS", "0")
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("FRONTEND_DIR", str(tmp_path / "frontend"))
    monkeypatch.setenv("JWT_SECRET_KEY", "test-secret")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def fake_ai():
    return FakeAIClient()


@pytest.fixture
def app(fake_ai):
    application = create_app()
    application.dependency_overrides[get_ai_client] = lambda: fake_ai
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def signup_and_login(client, username="jdoe", email="jdoe@example.com", password=STRONG_PASSWORD):
    response = client.post("/api/auth/signup", json={
        "first": "Jane",
        "last": "Doe",
        "username": username,
        "email": email,
        "password": password,
    })
    assert response.status_code == 201, response.text
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return signup_and_login(client)


@pytest.fixture
def login(client):
    """Factory for additional signed-in users."""
    def _login(**kwargs):
        return signup_and_login(client, **kwargs)
    return _login
