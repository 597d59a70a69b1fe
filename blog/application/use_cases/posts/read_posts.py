# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blog.domain.posts.entities import Post
from blog.domain.posts.exceptions import PostNotFoundError
from blog.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository, page_size: int = 20) -> None:
        self._posts = posts
        self._page_size = page_size

    def execute(self) -> Sequence[Post]:
        return self._posts.list_recent(self._page_size)


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
