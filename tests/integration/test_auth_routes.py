"""Integration tests for signup, login and password helpers."""

import pytest

PASSWORD = "Str0ng!Passw0rd"


def _signup(client, **overrides):
    payload = {
        "first": "Jane",
        "last": "Doe",
        "username": "jdoe",
        "email": "jdoe@example.com",
        "password": PASSWORD,
    }
    payload.update(overrides)
    return client.post("/api/auth/signup", json=payload)


@pytest.mark.integration
def test_signup_login_me(client):
    assert _signup(client).status_code == 201

    response = client.post("/api/auth/login", json={"username": "JDOE", "password": PASSWORD})
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    me = response.json()
    assert me["username"] == "jdoe"
    assert me["email"] == "jdoe@example.com"
    assert "password_hash" not in me


@pytest.mark.integration
def test_signup_reports_every_field(client):
    response = client.post("/api/auth/signup", json={"email": "not-an-email", "password": "weak"})
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors["first"] == "First name is required."
    assert errors["last"] == "Last name is required."
    assert errors["username"] == "Username is required."
    assert errors["email"] == "Please enter a valid email."
    assert "Password must be at least 8 characters long" in errors["password"]


@pytest.mark.integration
def test_username_and_email_unique_case_insensitively(client):
    assert _signup(client).status_code == 201
    response = _signup(client, username="JDoe", email="JDOE@example.com")
    assert response.status_code == 422
    assert response.json()["errors"] == {
        "username": "Username already taken.",
        "email": "Email address already registered.",
    }


@pytest.mark.integration
def test_wrong_password(client):
    _signup(client)
    response = client.post("/api/auth/login", json={"username": "jdoe", "password": "Wr0ng!Password"})
    assert response.status_code == 401


@pytest.mark.integration
def test_login_requires_fields(client):
    response = client.post("/api/auth/login", json={})
    assert response.status_code == 422
    assert set(response.json()["errors"]) == {"username", "password"}


@pytest.mark.integration
@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer not-a-token"}])
def test_me_requires_valid_token(client, headers):
    assert client.get("/api/auth/me", headers=headers).status_code == 401


@pytest.mark.integration
def test_password_helpers(client):
    response = client.post("/api/auth/password-strength", json={"password": "password"})
    body = response.json()
    assert body["is_valid"] is False
    assert "Password is too common. Please choose a stronger password" in body["errors"]

    response = client.get("/api/auth/generate-password", params={"length": 20})
    assert len(response.json()["password"]) == 20
