# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def add(self, post: Post) -> Post: ...
    def get(self, post_id: str) -> Post | None: ...
    def list_recent(self, limit: int) -> Sequence[Post]: ...

    def modify(self, post_id: str, change: Callable[[Post], Post]) -> Post:
        """Load, transform and persist a post within one transaction.

        Raises ``PostNotFoundError`` when the post does not exist; any error
        raised by ``change`` aborts the transaction.
        """
        ...
