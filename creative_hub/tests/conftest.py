from __future__ import annotations

from pathlib import Path

import pytest
from flask import Flask

from creative_hub.app import create_app, get_container
from creative_hub.shared.config import AppConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-signing-secret-0123456789"


def make_config(tmp_path: Path | None = None, **security: object) -> AppConfig:
    security_settings = {"ENABLE_RATE_LIMIT": False, **security}
    if tmp_path is None:
        return AppConfig(
            APP_ENV="test",
            APP_VARIANT="stateless",
            security=SecurityConfig(**security_settings),
        )
    return AppConfig(
        APP_ENV="test",
        APP_VARIANT="persistent",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"),
        security=SecurityConfig(JWT_SECRET=TEST_SECRET, **security_settings),
    )


@pytest.fixture()
def stateless_app() -> Flask:
    app = create_app(make_config())
    app.testing = True
    return app


@pytest.fixture()
def persistent_app(tmp_path: Path):
    app = create_app(make_config(tmp_path))
    app.testing = True
    yield app
    get_container(app).close()


@pytest.fixture()
def config_factory():
    return make_config
