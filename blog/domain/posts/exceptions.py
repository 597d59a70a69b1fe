# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.shared.errors.base import NotFoundError, PermissionDeniedError


class PostNotFoundError(NotFoundError):
    code = "post_not_found"

    def __init__(self, post_id: str) -> None:
        super().__init__(context={"post_id": post_id})


class NotPostAuthorError(PermissionDeniedError):
    code = "not_post_author"

    def __init__(self, post_id: str) -> None:
        super().__init__(context={"post_id": post_id})
