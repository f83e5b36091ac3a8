# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creative_hub.domain.posts.entities import Post
from creative_hub.domain.posts.exceptions import PostNotFoundError
from creative_hub.domain.posts.repositories import PostRepository

# Largest id a signed 64-bit INTEGER primary key can hold.
MAX_POST_ID = 2**63 - 1


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> Post:
        if not 1 <= post_id <= MAX_POST_ID:
            raise PostNotFoundError()
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError()
        return post
