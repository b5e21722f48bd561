"""Integration tests for app-level behaviour: health, middleware, frontend."""

import pytest
from fastapi.testclient import TestClient

from recruitai.core.config import get_settings
from recruitai.main import create_app


@pytest.mark.integration
def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.integration
def test_root_without_frontend(client):
    assert client.get("/").json()["message"] == "Frontend not found. API is running."


@pytest.mark.integration
def test_root_serves_frontend(tmp_path, monkeypatch):
    frontend = tmp_path / "site"
    frontend.mkdir()
    (frontend / "index.html").write_text("<h1>Recruit</h1>", encoding="utf-8")
    (frontend / "app.js").write_text("console.log('hi')", encoding="utf-8")
    monkeypatch.setenv("FRONTEND_DIR", str(frontend))
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        assert "<h1>Recruit</h1>" in client.get("/").text
        assert client.get("/static/app.js").status_code == 200


@pytest.mark.integration
def test_rate_limit_rejects_rapid_requests(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_INTERVAL_MS", "60000")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        assert client.get("/health").status_code == 200
        response = client.get("/health")
        assert response.status_code == 429
        assert response.json() == {"error": "Too many requests"}


@pytest.mark.integration
def test_body_size_limit(monkeypatch):
    monkeypatch.setenv("MAX_BODY_BYTES", "100")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        response = client.post("/api/polish", json={"jd": "x" * 500, "instructions": "shorter"})
        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}


@pytest.mark.integration
def test_body_size_limit_counts_chunked_bodies(monkeypatch):
    monkeypatch.setenv("MAX_BODY_BYTES", "100")
    get_settings.cache_clear()
    chunks = [b'{"jd": "', b"x" * 5000, b'", "instructions": "shorter"}']

    with TestClient(create_app()) as client:
        response = client.post(
            "/api/polish",
            content=(chunk for chunk in chunks),
            headers={"Content-Type": "application/json"},
        )
        assert "content-length" not in response.request.headers
        assert response.status_code == 413


@pytest.mark.integration
def test_chunked_body_under_limit_reaches_route(client, fake_ai):
    fake_ai.replies = ["Polished"]
    chunks = [b'{"jd": "Some JD", ', b'"instructions": "shorter"}']
    response = client.post(
        "/api/polish",
        content=(chunk for chunk in chunks),
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == {"text": "Polished"}


@pytest.mark.integration
def test_cors_allows_any_origin_by_default(client):
    response = client.get("/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.integration
def test_cors_restricted_origin(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGIN", "https://recruit.example.com")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        allowed = client.get("/health", headers={"Origin": "https://recruit.example.com"})
        assert allowed.headers["access-control-allow-origin"] == "https://recruit.example.com"
        denied = client.get("/health", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in denied.headers
