# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Flask, Request, current_app, g, request

from blog.application.services.session_tokens import SessionTokenCodec
from blog.domain.users.entities import SessionClaim
from blog.domain.users.exceptions import InvalidTokenError, MissingTokenError
from blog.shared.logging import logger, set_user_id

EXTENSION_KEY = "blog.auth_gate"


class AuthGate:
    """Turns the session cookie (or a Bearer header) into a verified claim."""

    def __init__(self, codec: SessionTokenCodec, *, cookie_name: str = "token") -> None:
        self._codec = codec
        self._cookie_name = cookie_name

    def init_app(self, app: Flask) -> None:
        app.extensions[EXTENSION_KEY] = self

    def extract_token(self, req: Request) -> str:
        token = (req.cookies.get(self._cookie_name) or "").strip()
        if token:
            return token
        auth = req.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            return auth[7:].strip()
        return ""

    def authenticate(self, req: Request) -> SessionClaim:
        token = self.extract_token(req)
        if not token:
            raise MissingTokenError()
        return self._codec.verify(token)


def _gate() -> AuthGate:
    return cast(AuthGate, current_app.extensions[EXTENSION_KEY])


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        try:
            claim = _gate().authenticate(request)
        except MissingTokenError:
            logger.warning(f"No session token on {request.method} {request.path}")
            raise
        except InvalidTokenError as exc:
            reason = (exc.context or {}).get("reason", "unknown")
            logger.warning(
                f"Auth failed (token {reason}) on {request.method} {request.path}"
            )
            raise

        g.identity = claim
        g.user_id = claim.user_id
        set_user_id(claim.user_id)
        logger.debug(f"Auth OK: user={claim.user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


def current_identity() -> SessionClaim:
    """Return the claim stored by ``auth_required`` for this request."""
    return cast(SessionClaim, g.identity)


__all__ = ["AuthGate", "auth_required", "current_identity"]
