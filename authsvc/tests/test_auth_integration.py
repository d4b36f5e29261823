from __future__ import annotations

from datetime import timedelta

import pytest
from flask import Flask

from authsvc.app import create_app
from authsvc.application.services.password_hashing import WerkzeugPasswordHasher
from authsvc.infrastructure.container import Container


@pytest.fixture()
def container(app_config, clock) -> Container:
    return Container(app_config, clock=clock)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


def _register(client, username: str = "ann", email: str = "ann@x.com", password: str = "secret1"):
    return client.post(
        "/auth/register", json={"username": username, "email": email, "password": password}
    )


def test_register_login_protected_flow(app: Flask) -> None:
    with app.test_client() as client:
        register = _register(client, "bob", "bob@x.com", "password1")
        assert register.status_code == 201
        assert register.get_json()["message"] == "User registered successfully"

        login = client.post("/auth/login", json={"username": "bob", "password": "password1"})
        assert login.status_code == 200
        token = login.get_json()["token"]

        for issued in (register.get_json()["token"], token):
            protected = client.get("/protected", headers={"Authorization": f"Bearer {issued}"})
            assert protected.status_code == 200
            assert protected.get_json() == {"status": "success", "user": "bob"}


def test_registered_password_is_stored_hashed(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        assert _register(client).status_code == 201

    user = container.user_repository.find_by_username("ann")
    assert user is not None
    assert user.password_hash != "secret1"
    assert user.password_hash.startswith("pbkdf2:sha256:1000$")


def test_duplicate_registration_returns_409(app: Flask) -> None:
    with app.test_client() as client:
        assert _register(client).status_code == 201
        duplicate_name = _register(client, email="other@x.com")
        duplicate_email = _register(client, username="ann2")

    assert duplicate_name.status_code == 409
    assert duplicate_name.get_json() == {"error": "duplicate_user"}
    assert duplicate_email.status_code == 409


def test_login_failures_are_indistinguishable(app: Flask) -> None:
    with app.test_client() as client:
        _register(client)
        wrong_password = client.post("/auth/login", json={"username": "ann", "password": "wrong1"})
        unknown_user = client.post("/auth/login", json={"username": "ghost", "password": "x"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json() == {"error": "invalid_credentials"}


def test_registration_validation_returns_422(app: Flask) -> None:
    with app.test_client() as client:
        short_name = _register(client, username="ab")
        bad_email = _register(client, email="not-an-email")
        short_password = _register(client, password="12345")

    for response in (short_name, bad_email, short_password):
        assert response.status_code == 422
        assert response.get_json()["error"] == "validation_error"


def test_expired_token_is_rejected(app: Flask, clock) -> None:
    with app.test_client() as client:
        token = _register(client).get_json()["token"]
        clock.advance(timedelta(hours=24))
        response = client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}


def test_expires_at_follows_configured_ttl(app: Flask) -> None:
    with app.test_client() as client:
        payload = _register(client).get_json()

    assert payload["expires_at"].startswith("2025-01-02T12:00:00")


def test_protected_without_token_returns_401(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/protected")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_welcome_and_db_status(app: Flask) -> None:
    with app.test_client() as client:
        welcome = client.get("/api")
        status = client.get("/dbstatus")

    assert welcome.status_code == 200
    assert "Welcome" in welcome.get_data(as_text=True)
    assert status.status_code == 200
    assert status.get_data(as_text=True) == "Successfully connected to the database!"


def test_security_headers_are_set(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api", headers={"X-Request-ID": "req-1"})

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Cache-Control"] == "no-store"


def test_dummy_hash_is_built_before_first_login(app_config, clock, monkeypatch) -> None:
    calls: list[str] = []
    original_hash = WerkzeugPasswordHasher.hash

    def counting_hash(self, password: str) -> str:
        calls.append(password)
        return original_hash(self, password)

    monkeypatch.setattr(WerkzeugPasswordHasher, "hash", counting_hash)

    app = create_app(container=Container(app_config, clock=clock))
    assert len(calls) == 1

    with app.test_client() as client:
        response = client.post("/auth/login", json={"username": "ghost", "password": "x"})

    assert response.status_code == 401
    assert len(calls) == 1
