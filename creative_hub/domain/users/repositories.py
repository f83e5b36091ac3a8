# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import AccessToken, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user: User) -> AccessToken: ...
