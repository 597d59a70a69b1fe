# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import joinedload

from blog.domain.posts.entities import Post as DomainPost
from blog.domain.posts.exceptions import PostNotFoundError
from blog.domain.posts.repositories import PostRepository
from blog.infrastructure.db.models import Post
from blog.infrastructure.db.session import session_scope


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        summary=row.summary,
        content=row.content,
        author_id=row.author_id,
        cover=row.cover,
        author_name=row.author.username if row.author is not None else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyPostRepository(PostRepository):
    def add(self, post: DomainPost) -> DomainPost:
        with session_scope() as session:
            row = Post(
                id=post.id,
                title=post.title,
                summary=post.summary,
                content=post.content,
                cover=post.cover,
                author_id=post.author_id,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def get(self, post_id: str) -> DomainPost | None:
        with session_scope() as session:
            row = session.get(Post, post_id, options=[joinedload(Post.author)])
            return _to_domain(row) if row else None

    def list_recent(self, limit: int) -> Sequence[DomainPost]:
        with session_scope() as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .order_by(Post.created_at.desc(), Post.id.desc())
                .limit(limit)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def modify(self, post_id: str, change: Callable[[DomainPost], DomainPost]) -> DomainPost:
        with session_scope() as session:
            row = (
                session.query(Post)
                .options(joinedload(Post.author))
                .filter(Post.id == post_id)
                .with_for_update(of=Post)
                .first()
            )
            if row is None:
                raise PostNotFoundError(post_id)

            current = _to_domain(row)
            updated = change(current)

            row.title = updated.title
            row.summary = updated.summary
            row.content = updated.content
            row.cover = updated.cover
            if updated.updated_at is not None:
                row.updated_at = updated.updated_at
            session.flush()
            return _to_domain(row)
