from __future__ import annotations

from datetime import UTC, datetime

import pytest

from blog.domain.posts.entities import Post
from blog.domain.users.entities import User
from blog.domain.users.exceptions import DuplicateUserNameError
from blog.infrastructure.db import SessionLocal
from blog.infrastructure.db import models
from blog.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from blog.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)


def _user(user_id: str, username: str = "alice") -> User:
    return User(
        id=user_id,
        username=username,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def test_unique_index_rejects_second_user_with_same_name(reset_database) -> None:
    repo = SqlAlchemyUserRepository()
    repo.add(_user("u1"))

    with pytest.raises(DuplicateUserNameError) as exc_info:
        repo.add(_user("u2"))

    assert exc_info.value.context == {"userName": "alice"}
    session = SessionLocal()
    try:
        assert session.query(models.User).count() == 1
    finally:
        session.close()


def test_post_timestamps_come_back_in_utc(reset_database) -> None:
    SqlAlchemyUserRepository().add(_user("u1"))
    repo = SqlAlchemyPostRepository()
    now = datetime.now(UTC)
    repo.add(
        Post(
            id="p1",
            title="t",
            summary="s",
            content="c",
            author_id="u1",
            created_at=now,
            updated_at=now,
        )
    )

    loaded = repo.get("p1")
    listed = repo.list_recent(10)[0]
    revised = repo.modify("p1", lambda post: post.revise(title="t2"))

    for post in (loaded, listed, revised):
        assert post.created_at.utcoffset().total_seconds() == 0
        assert post.updated_at.utcoffset().total_seconds() == 0
    assert loaded.created_at == now
    assert loaded.author_name == "alice"
