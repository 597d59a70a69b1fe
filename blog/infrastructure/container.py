# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from blog.application.services.password_hashing import WerkzeugPasswordHasher
from blog.application.services.session_tokens import SessionTokenCodec
from blog.application.use_cases.posts.create_post import CreatePostUseCase
from blog.application.use_cases.posts.read_posts import GetPostUseCase, ListPostsUseCase
from blog.application.use_cases.posts.update_post import UpdatePostUseCase
from blog.application.use_cases.users.login_user import LoginUserUseCase
from blog.application.use_cases.users.logout_user import LogoutUserUseCase
from blog.application.use_cases.users.register_user import RegisterUserUseCase
from blog.infrastructure.auth import AuthGate
from blog.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from blog.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blog.infrastructure.storage import LocalCoverStorage
from blog.interfaces.http.controllers.auth_controller import AuthController
from blog.interfaces.http.controllers.misc_controller import MiscController
from blog.interfaces.http.controllers.posts_controller import PostsController
from blog.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def session_token_codec(self) -> SessionTokenCodec:
        return SessionTokenCodec(
            self._config.secret_key,
            ttl=timedelta(seconds=self._config.session.ttl_seconds),
            algorithm=self._config.session.algorithm,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(
            self.session_token_codec,
            cookie_name=self._config.session.cookie_name,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository()

    @cached_property
    def cover_storage(self) -> LocalCoverStorage:
        return LocalCoverStorage(self._config.uploads.directory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_codec)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository, covers=self.cover_storage)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(
            posts=self.post_repository, page_size=self._config.posts_page_size
        )

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(posts=self.post_repository, covers=self.cover_storage)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            security=self._config.security,
            cookie_name=self._config.session.cookie_name,
            session_ttl=timedelta(seconds=self._config.session.ttl_seconds),
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_use_case=self.create_post_use_case,
            list_use_case=self.list_posts_use_case,
            get_use_case=self.get_post_use_case,
            update_use_case=self.update_post_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(uploads_dir=self._config.uploads.directory)
