# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.users.entities import SessionClaim, User
from blog.domain.users.exceptions import InvalidPasswordError, UserNotFoundError
from blog.domain.users.repositories import PasswordHasher, SessionTokens, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokens,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidPasswordError()

        token = self._tokens.issue(SessionClaim.for_user(user))
        return user, token
