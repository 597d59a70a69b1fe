# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from blog.application.interfaces import CoverStorage, CoverUpload
from blog.domain.posts.entities import Post
from blog.domain.posts.policy import authorize
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaim


@dataclass(slots=True, frozen=True)
class UpdatePostInput:
    title: str | None = None
    summary: str | None = None
    content: str | None = None
    cover: CoverUpload | None = None


class UpdatePostUseCase:
    """Edit a post on behalf of its author.

    Existence, ownership and the write are resolved inside a single repository
    transaction; the cover is stored only once ownership is established. A
    replaced cover is removed after the commit, a new one on rollback.
    """

    def __init__(self, *, posts: PostRepository, covers: CoverStorage) -> None:
        self._posts = posts
        self._covers = covers

    def execute(self, identity: SessionClaim, post_id: str, data: UpdatePostInput) -> Post:
        stored: list[str] = []
        replaced: list[str] = []

        def change(current: Post) -> Post:
            authorize(identity, current)
            cover_path = None
            if data.cover is not None:
                cover_path = self._covers.store(data.cover)
                stored.append(cover_path)
                if current.cover:
                    replaced.append(current.cover)
            return current.revise(
                title=data.title,
                summary=data.summary,
                content=data.content,
                cover=cover_path,
            )

        try:
            updated = self._posts.modify(post_id, change)
        except Exception:
            # the transaction rolled back; the new cover belongs to nothing
            for path in stored:
                self._covers.discard(path)
            raise

        for path in replaced:
            self._covers.discard(path)
        return updated
