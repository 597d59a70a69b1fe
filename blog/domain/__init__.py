# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts.entities import Post
from .posts.exceptions import NotPostAuthorError, PostNotFoundError
from .posts.policy import Access, authorize
from .users.entities import SessionClaim, User
from .users.exceptions import (
    DuplicateUserNameError,
    InvalidPasswordError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)

__all__ = [
    "Access",
    "DuplicateUserNameError",
    "InvalidPasswordError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotPostAuthorError",
    "Post",
    "PostNotFoundError",
    "SessionClaim",
    "User",
    "UserNotFoundError",
    "authorize",
]
