# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.domain.users.entities import AccessToken
from creative_hub.domain.users.exceptions import InvalidCredentialsError
from creative_hub.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def execute(self, email: str, password: str) -> AccessToken:
        user = self._users.find_by_email(email)
        if user is None:
            # Spend the same hashing work as a real check so timing does not
            # reveal whether the email is registered.
            self._password_hasher.verify(password, self._unknown_user_hash())
            raise InvalidCredentialsError()

        # Unknown email and wrong password are reported identically.
        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(user)

    def _unknown_user_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("unknown-user-placeholder")
        return self._dummy_hash
