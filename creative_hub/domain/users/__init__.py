# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "PasswordHasher",
    "TokenIssuer",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
