from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from creative_hub.application.services.token_issuer import (TOKEN_LIFETIME,
                                                            InvalidTokenError,
                                                            JwtTokenIssuer)
from creative_hub.domain.users.entities import User

SECRET = "unit-test-secret"
ISSUED = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


class Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> Clock:
    return Clock(ISSUED)


@pytest.fixture()
def issuer(clock: Clock) -> JwtTokenIssuer:
    return JwtTokenIssuer(SECRET, clock=clock)


@pytest.fixture()
def user() -> User:
    return User(id=7, email="alice@example.com", password_hash="x", created_at=ISSUED)


def test_token_lifetime_is_two_hours() -> None:
    assert TOKEN_LIFETIME == timedelta(hours=2)


def test_issue_embeds_identity_and_exact_expiry(issuer: JwtTokenIssuer, user: User) -> None:
    access = issuer.issue(user)

    claims = jwt.get_unverified_claims(access.token)
    assert claims["userId"] == 7
    assert claims["email"] == "alice@example.com"
    assert claims["iat"] == int(ISSUED.timestamp())
    assert claims["exp"] - claims["iat"] == 7200
    assert access.expires_at - access.issued_at == timedelta(hours=2)


def test_token_valid_until_expiry(issuer: JwtTokenIssuer, clock: Clock, user: User) -> None:
    access = issuer.issue(user)

    clock.now = ISSUED + timedelta(hours=2) - timedelta(seconds=1)
    assert issuer.verify(access.token)["userId"] == 7


def test_token_expired_after_two_hours(issuer: JwtTokenIssuer, clock: Clock, user: User) -> None:
    access = issuer.issue(user)

    clock.now = ISSUED + timedelta(hours=2)
    with pytest.raises(InvalidTokenError):
        issuer.verify(access.token)


def test_token_signed_with_other_secret_is_rejected(clock: Clock, user: User) -> None:
    foreign = JwtTokenIssuer("another-secret", clock=clock).issue(user)

    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer(SECRET, clock=clock).verify(foreign.token)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer("")
