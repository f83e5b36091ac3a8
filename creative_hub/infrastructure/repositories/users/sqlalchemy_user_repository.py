# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from creative_hub.domain.users.entities import User as DomainUser
from creative_hub.domain.users.exceptions import UserAlreadyExistsError
from creative_hub.domain.users.repositories import UserRepository
from creative_hub.infrastructure.db.models import User
from creative_hub.infrastructure.db.session import Database


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at or datetime.now(UTC),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # A concurrent registration won the race on users.email
            raise UserAlreadyExistsError() from exc
