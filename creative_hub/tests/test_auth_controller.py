from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from creative_hub.application.use_cases.users.login_user import LoginUserUseCase
from creative_hub.application.use_cases.users.register_user import \
    RegisterUserUseCase
from creative_hub.domain.users.entities import AccessToken, User
from creative_hub.domain.users.exceptions import InvalidCredentialsError
from creative_hub.interfaces.http.controllers.auth_controller import AuthController
from creative_hub.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_register_endpoint_returns_envelope(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, email: str, password: str) -> User:
            register_called["args"] = (email, password)
            return User(
                id=1,
                email=email,
                password_hash="hash",
                created_at=datetime.now(UTC),
            )

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register", json={"email": "Alice@Example.com", "password": "secret123"}
        )

    assert response.status_code == 200
    assert register_called["args"] == ("alice@example.com", "secret123")
    assert response.get_json() == {
        "success": True,
        "data": {"message": "User registered successfully."},
    }


def test_register_short_password_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register", json={"email": "alice@example.com", "password": "12345"}
        )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["errors"][0]["field"] == "password"
    register.execute.assert_not_called()


def test_register_password_length_is_capped(flask_app: Flask) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        longest = client.post(
            "/api/register", json={"email": "alice@example.com", "password": "x" * 128}
        )
        too_long = client.post(
            "/api/register", json={"email": "bob@example.com", "password": "x" * 129}
        )

    assert longest.status_code == 200
    assert too_long.status_code == 400
    assert too_long.get_json()["errors"][0]["field"] == "password"
    register.execute.assert_called_once_with("alice@example.com", "x" * 128)


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    controller = AuthController(register_use_case=MagicMock(), login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "a"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.get_json()["errors"]}
    assert fields == {"email", "password"}


def test_login_success_returns_token(flask_app: Flask) -> None:
    issued = datetime(2025, 1, 1, tzinfo=UTC)
    login = MagicMock()
    login.execute.return_value = AccessToken(
        token="signed.jwt.value",
        user_id=3,
        issued_at=issued,
        expires_at=issued + timedelta(hours=2),
    )
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=cast(LoginUserUseCase, login)
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/login", json={"email": "bob@example.com", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.get_json()["data"] == {
        "token": "signed.jwt.value",
        "expires_at": "2025-01-01T02:00:00+00:00",
    }
    login.execute.assert_called_once_with("bob@example.com", "secret123")


def test_login_failure_is_generic(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/login", json={"email": "bob@example.com", "password": "nope"}
        )

    assert response.status_code == 400
    assert response.get_json() == {
        "success": False,
        "errors": [{"code": "invalid_credentials", "message": "Invalid credentials"}],
    }
