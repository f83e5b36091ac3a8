# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response

from creative_hub.application.use_cases.posts.get_post import GetPostUseCase
from creative_hub.application.use_cases.posts.list_posts import ListPostsUseCase
from creative_hub.interfaces.http.dto.envelope import success


class PostsController:
    def __init__(
        self,
        *,
        list_posts: ListPostsUseCase,
        get_post: GetPostUseCase,
    ) -> None:
        self._list_posts = list_posts
        self._get_post = get_post

    def index(self) -> tuple[Response, int]:
        posts = self._list_posts.execute()
        return success([post.to_dict() for post in posts])

    def show(self, post_id: int) -> tuple[Response, int]:
        post = self._get_post.execute(post_id)
        return success(post.to_dict())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        bp.add_url_rule("", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/<int:post_id>", view_func=self.show, methods=["GET"])
        return bp
