# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from creative_hub.domain.posts.entities import Post as DomainPost
from creative_hub.domain.posts.repositories import PostRepository
from creative_hub.infrastructure.db.models import Post
from creative_hub.infrastructure.db.session import Database


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(id=row.id, title=row.title, body=row.body, created_at=row.created_at)


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def list_all(self) -> Sequence[DomainPost]:
        with self._db.session_scope() as session:
            rows = session.scalars(select(Post).order_by(Post.id)).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, post_id: int) -> DomainPost | None:
        with self._db.session_scope() as session:
            row = session.get(Post, post_id)
            if row is None:
                return None
            return _to_domain(row)
