# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.shared.errors.base import AuthenticationError, ConflictError, DomainError


class DuplicateUserNameError(ConflictError):
    code = "duplicate_user_name"


class UserNotFoundError(DomainError):
    code = "user_not_found"


class InvalidPasswordError(DomainError):
    code = "invalid_password"


class MissingTokenError(AuthenticationError):
    code = "missing_token"


class InvalidTokenError(AuthenticationError):
    """Token is malformed, forged or expired; ``context["reason"]`` says which."""

    code = "invalid_token"
