# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ports the account use cases depend on."""

from __future__ import annotations

from typing import Protocol

from .entities import SessionClaim, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...

    def add(self, user: User) -> User:
        """Persist a new user; raises ``DuplicateUserNameError`` if the name is taken."""
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokens(Protocol):
    def issue(self, claim: SessionClaim) -> str: ...

    def verify(self, token: str) -> SessionClaim:
        """Raises ``InvalidTokenError`` for anything not issued by ``issue``."""
        ...
