# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, self-contained session tokens.

Tokens are HS256 JWTs carrying ``userId``, ``userName``, ``iat`` and ``exp``.
Nothing is stored server side: possession of a token signed with the server
key and not yet expired is the whole session.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from blog.domain.users.entities import SessionClaim
from blog.domain.users.exceptions import InvalidTokenError

_REQUIRED_CLAIMS = ("userId", "userName", "iat", "exp")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionTokenCodec:
    def __init__(
        self,
        secret_key: str,
        *,
        ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, claim: SessionClaim) -> str:
        issued_at = self._clock()
        payload = {
            "userId": claim.user_id,
            "userName": claim.username,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> SessionClaim:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": list(_REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError(context={"reason": "expired"}) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(context={"reason": "malformed_or_forged"}) from exc

        user_id = payload.get("userId")
        username = payload.get("userName")
        if not isinstance(user_id, str) or not user_id or not isinstance(username, str):
            raise InvalidTokenError(context={"reason": "bad_claims"})

        return SessionClaim(
            user_id=user_id,
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )


__all__ = ["SessionTokenCodec"]
