# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed access tokens issued at login."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from http import HTTPStatus
from typing import Any

from jose import JWTError, jwt

from creative_hub.domain.users.entities import AccessToken, User
from creative_hub.domain.users.repositories import TokenIssuer
from creative_hub.shared.errors.base import DomainError

TOKEN_LIFETIME = timedelta(hours=2)
TOKEN_ALGORITHM = "HS256"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid or expired token"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        secret: str,
        *,
        lifetime: timedelta = TOKEN_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._lifetime = lifetime
        self._clock = clock

    def issue(self, user: User) -> AccessToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._lifetime
        claims = {
            "userId": user.id,
            "email": user.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM)
        return AccessToken(
            token=token,
            user_id=user.id,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> dict[str, Any]:
        """Check the signature and expiry of ``token`` and return its claims."""
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError() from exc

        exp = claims.get("exp")
        if not isinstance(exp, int) or self._clock().timestamp() >= exp:
            raise InvalidTokenError()
        return claims


__all__ = ["InvalidTokenError", "JwtTokenIssuer", "TOKEN_LIFETIME"]
