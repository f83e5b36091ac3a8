# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container.

One container is built per application by ``create_app`` and owns the
process-wide resources: the database handle and the rate limiter.
"""

from __future__ import annotations

from functools import cached_property

from creative_hub.application.services.password_hashing import \
    WerkzeugPasswordHasher
from creative_hub.application.services.token_issuer import JwtTokenIssuer
from creative_hub.application.use_cases.posts.get_post import GetPostUseCase
from creative_hub.application.use_cases.posts.list_posts import ListPostsUseCase
from creative_hub.application.use_cases.submissions.submit_contact import \
    SubmitContactUseCase
from creative_hub.application.use_cases.submissions.submit_service_request import \
    SubmitServiceRequestUseCase
from creative_hub.application.use_cases.users.login_user import LoginUserUseCase
from creative_hub.application.use_cases.users.register_user import \
    RegisterUserUseCase
from creative_hub.domain.submissions.repositories import SubmissionSink
from creative_hub.infrastructure.db import Database
from creative_hub.infrastructure.repositories.posts.sqlalchemy_post_repository import \
    SqlAlchemyPostRepository
from creative_hub.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from creative_hub.infrastructure.submissions import LoggingSubmissionSink
from creative_hub.interfaces.http.controllers.auth_controller import AuthController
from creative_hub.interfaces.http.controllers.forms_controller import \
    FormsController
from creative_hub.interfaces.http.controllers.misc_controller import MiscController
from creative_hub.interfaces.http.controllers.posts_controller import \
    PostsController
from creative_hub.shared.config import AppConfig
from creative_hub.shared.middleware.rate_limit import InMemoryRateLimiter


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._database: Database | None = None

    # Resources

    @property
    def database(self) -> Database | None:
        if not self.config.is_persistent():
            return None
        if self._database is None:
            self._database = Database(self.config.database)
        return self._database

    @cached_property
    def rate_limiter(self) -> InMemoryRateLimiter | None:
        security = self.config.security
        if not security.enable_rate_limit:
            return None
        return InMemoryRateLimiter(security.rate_limit_requests, security.rate_limit_window)

    def close(self) -> None:
        if self._database is not None:
            self._database.dispose()
            self._database = None

    # Forms

    @cached_property
    def submission_sink(self) -> SubmissionSink:
        return LoggingSubmissionSink()

    @cached_property
    def forms_controller(self) -> FormsController:
        return FormsController(
            contact_use_case=SubmitContactUseCase(sink=self.submission_sink),
            service_request_use_case=SubmitServiceRequestUseCase(sink=self.submission_sink),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(static_dir=self.config.static_dir, db=self.database)

    # Persistent variant

    def require_database(self) -> Database:
        db = self.database
        if db is None:
            raise RuntimeError("the stateless variant has no database")
        return db

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.config.security.token_secret or "")

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.require_database())

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.require_database())

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=RegisterUserUseCase(
                users=self.user_repository,
                password_hasher=self.password_hasher,
            ),
            login_use_case=LoginUserUseCase(
                users=self.user_repository,
                tokens=self.token_issuer,
                password_hasher=self.password_hasher,
            ),
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_posts=ListPostsUseCase(posts=self.post_repository),
            get_post=GetPostUseCase(posts=self.post_repository),
        )
