from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator, Sequence
from datetime import UTC, datetime
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="blog-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'blog.db'}")
os.environ.setdefault("UPLOADS_DIR", str(_TMP / "uploads"))
os.environ.setdefault("LOG_FILE", str(_TMP / "blog.log"))
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes!!")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from blog.domain.posts.entities import Post  # noqa: E402
from blog.domain.posts.exceptions import PostNotFoundError  # noqa: E402
from blog.domain.users.entities import User  # noqa: E402
from blog.domain.users.exceptions import DuplicateUserNameError  # noqa: E402


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUserNameError()
        self._users[user.username] = user
        return user

    def count(self) -> int:
        return len(self._users)


class InMemoryPostRepository:
    def __init__(self) -> None:
        self._posts: dict[str, Post] = {}

    def add(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    def get(self, post_id: str) -> Post | None:
        return self._posts.get(post_id)

    def list_recent(self, limit: int) -> Sequence[Post]:
        ordered = sorted(
            self._posts.values(),
            key=lambda p: p.created_at or datetime.min.replace(tzinfo=UTC),
            reverse=True,
        )
        return ordered[:limit]

    def modify(self, post_id: str, change: Callable[[Post], Post]) -> Post:
        current = self._posts.get(post_id)
        if current is None:
            raise PostNotFoundError(post_id)
        updated = change(current)
        self._posts[post_id] = updated
        return updated


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class RecordingCoverStorage:
    def __init__(self) -> None:
        self.stored: list[str] = []
        self.discarded: list[str] = []

    def store(self, upload) -> str:
        self.stored.append(upload.original_name)
        return f"cover-{len(self.stored)}.{upload.original_name.rsplit('.', 1)[-1]}"

    def discard(self, path: str) -> None:
        self.discarded.append(path)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def covers() -> RecordingCoverStorage:
    return RecordingCoverStorage()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def codec():
    from blog.application.services.session_tokens import SessionTokenCodec

    return SessionTokenCodec("unit-test-signing-key-0123456789abcdef")


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from blog.infrastructure.db import ENGINE, Base, init_db

    init_db()
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
