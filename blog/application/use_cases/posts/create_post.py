# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from blog.application.interfaces import CoverStorage, CoverUpload
from blog.domain.posts.entities import Post
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import SessionClaim


@dataclass(slots=True, frozen=True)
class CreatePostInput:
    title: str
    summary: str
    content: str
    cover: CoverUpload | None = None


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, covers: CoverStorage) -> None:
        self._posts = posts
        self._covers = covers

    def execute(self, identity: SessionClaim, data: CreatePostInput) -> Post:
        cover_path = self._covers.store(data.cover) if data.cover is not None else None
        now = datetime.now(UTC)
        post = Post(
            id=uuid4().hex,
            title=data.title,
            summary=data.summary,
            content=data.content,
            author_id=identity.user_id,
            cover=cover_path,
            author_name=identity.username,
            created_at=now,
            updated_at=now,
        )
        try:
            return self._posts.add(post)
        except Exception:
            if cover_path is not None:
                self._covers.discard(cover_path)
            raise
