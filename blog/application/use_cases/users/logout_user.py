# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for ending a browser session."""

from __future__ import annotations

from blog.domain.users.entities import SessionClaim
from blog.domain.users.exceptions import InvalidTokenError
from blog.domain.users.repositories import SessionTokens


class LogoutUserUseCase:
    """Tokens are stateless, so logging out only tells us who is leaving.

    The caller discards the cookie; there is nothing to revoke server side.
    """

    def __init__(self, *, tokens: SessionTokens) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> SessionClaim | None:
        if not token:
            return None
        try:
            return self._tokens.verify(token)
        except InvalidTokenError:
            return None
