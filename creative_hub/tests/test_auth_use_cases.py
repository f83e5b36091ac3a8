from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from creative_hub.application.use_cases.users.login_user import LoginUserUseCase
from creative_hub.application.use_cases.users.register_user import RegisterUserUseCase
from creative_hub.domain.users.entities import AccessToken, User
from creative_hub.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from creative_hub.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.email] = new_user
        return new_user


class FakeTokenIssuer(TokenIssuer):
    def issue(self, user: User) -> AccessToken:
        now = datetime.now(UTC)
        return AccessToken(
            token=f"token-{user.id}",
            user_id=user.id,
            issued_at=now,
            expires_at=now + timedelta(hours=2),
        )


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=FakeTokenIssuer(), password_hasher=DeterministicHasher()
    )


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute("alice@example.com", "secret123")

    assert user.id == 1
    assert user.email == "alice@example.com"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_email("alice@example.com") is not None


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("alice@example.com", "secret123")

    with pytest.raises(UserAlreadyExistsError) as excinfo:
        register.execute("alice@example.com", "other-password")

    assert excinfo.value.to_dict() == {
        "success": False,
        "errors": [{"code": "user_already_exists", "message": "User already exists"}],
    }


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    register.execute("alice@example.com", "secret123")

    token = login.execute("alice@example.com", "secret123")

    assert token.token == "token-1"
    assert token.user_id == 1


def test_login_user_wrong_password(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    register.execute("alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError):
        login.execute("alice@example.com", "wrong")


def test_login_unknown_user_matches_wrong_password(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@example.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("bob@example.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return super().verify(password, hashed)


def test_login_unknown_user_still_runs_password_check(users: InMemoryUserRepository) -> None:
    hasher = CountingHasher()
    login = LoginUserUseCase(users=users, tokens=FakeTokenIssuer(), password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@example.com", "secret123")
    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@example.com", "another-guess")

    assert len(hasher.verified) == 2
    assert hasher.verified[0] == hasher.verified[1]
