# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from blog.domain.users.entities import SessionClaim, User
from blog.domain.users.exceptions import DuplicateUserNameError
from blog.domain.users.repositories import PasswordHasher, SessionTokens, UserRepository


class RegisterUserUseCase:
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
        existing = self._users.find_by_username(username)
        if existing:
            raise DuplicateUserNameError(context={"userName": username})
        hashed = self._password_hasher.hash(password)
        user = User(
            id=uuid4().hex,
            username=username,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        # the store's unique index raises DuplicateUserNameError on a lost race
        persisted = self._users.add(user)
        token = self._tokens.issue(SessionClaim.for_user(persisted))
        return persisted, token
