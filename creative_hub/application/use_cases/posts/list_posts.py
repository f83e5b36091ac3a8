"""Use-case for listing every published post."""

from __future__ import annotations

from collections.abc import Sequence

from creative_hub.domain.posts.entities import Post
from creative_hub.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return self._posts.list_all()
