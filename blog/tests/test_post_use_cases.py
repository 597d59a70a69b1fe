from __future__ import annotations

import io
from datetime import UTC, datetime, timedelta

import pytest

from blog.application.interfaces import CoverUpload
from blog.application.use_cases.posts.create_post import CreatePostInput, CreatePostUseCase
from blog.application.use_cases.posts.read_posts import GetPostUseCase, ListPostsUseCase
from blog.application.use_cases.posts.update_post import UpdatePostInput, UpdatePostUseCase
from blog.domain.posts.entities import Post
from blog.domain.posts.exceptions import NotPostAuthorError, PostNotFoundError
from blog.domain.users.entities import SessionClaim

ALICE = SessionClaim(user_id="alice-id", username="alice")
BOB = SessionClaim(user_id="bob-id", username="bob")


@pytest.fixture()
def alice_post(posts, covers) -> Post:
    return CreatePostUseCase(posts=posts, covers=covers).execute(
        ALICE, CreatePostInput(title="Hello", summary="First", content="Body")
    )


def test_create_post_records_author(posts, covers) -> None:
    post = CreatePostUseCase(posts=posts, covers=covers).execute(
        ALICE,
        CreatePostInput(
            title="Hello",
            summary="First",
            content="Body",
            cover=CoverUpload(original_name="photo.png", stream=io.BytesIO(b"png")),
        ),
    )

    assert post.author_id == "alice-id"
    assert post.author_name == "alice"
    assert post.cover == "cover-1.png"
    assert posts.get(post.id) == post


def test_other_user_cannot_update(posts, covers, alice_post: Post) -> None:
    use_case = UpdatePostUseCase(posts=posts, covers=covers)

    with pytest.raises(NotPostAuthorError):
        use_case.execute(
            BOB,
            alice_post.id,
            UpdatePostInput(
                title="Pwned",
                cover=CoverUpload(original_name="evil.png", stream=io.BytesIO(b"x")),
            ),
        )

    assert posts.get(alice_post.id) == alice_post
    assert covers.stored == []


def test_author_updates_title(posts, covers, alice_post: Post) -> None:
    updated = UpdatePostUseCase(posts=posts, covers=covers).execute(
        ALICE, alice_post.id, UpdatePostInput(title="Hello again")
    )

    assert updated.title == "Hello again"
    assert updated.summary == alice_post.summary
    assert updated.content == alice_post.content
    assert updated.author_id == alice_post.author_id
    assert updated.updated_at >= alice_post.updated_at
    assert posts.get(alice_post.id).title == "Hello again"


def test_update_missing_post(posts, covers) -> None:
    with pytest.raises(PostNotFoundError):
        UpdatePostUseCase(posts=posts, covers=covers).execute(
            ALICE, "nope", UpdatePostInput(title="x")
        )


def test_get_missing_post(posts) -> None:
    with pytest.raises(PostNotFoundError) as exc_info:
        GetPostUseCase(posts=posts).execute("nope")

    assert exc_info.value.context == {"post_id": "nope"}


def test_list_is_newest_first_and_capped(posts) -> None:
    base = datetime(2024, 1, 1, tzinfo=UTC)
    for i in range(5):
        posts.add(
            Post(
                id=f"p{i}",
                title=f"t{i}",
                summary="s",
                content="c",
                author_id="alice-id",
                created_at=base + timedelta(minutes=i),
            )
        )

    listed = ListPostsUseCase(posts=posts, page_size=3).execute()

    assert [p.id for p in listed] == ["p4", "p3", "p2"]


def _png(name: str = "photo.png") -> CoverUpload:
    return CoverUpload(original_name=name, stream=io.BytesIO(b"png"))


def test_replacing_cover_removes_previous_file(posts, covers) -> None:
    post = CreatePostUseCase(posts=posts, covers=covers).execute(
        ALICE, CreatePostInput(title="t", summary="s", content="c", cover=_png("a.png"))
    )

    updated = UpdatePostUseCase(posts=posts, covers=covers).execute(
        ALICE, post.id, UpdatePostInput(cover=_png("b.png"))
    )

    assert updated.cover == "cover-2.png"
    assert covers.discarded == ["cover-1.png"]


def test_failed_insert_discards_new_cover(covers) -> None:
    class BrokenPosts:
        def add(self, post: Post) -> Post:
            raise RuntimeError("insert failed")

    with pytest.raises(RuntimeError):
        CreatePostUseCase(posts=BrokenPosts(), covers=covers).execute(
            ALICE, CreatePostInput(title="t", summary="s", content="c", cover=_png())
        )

    assert covers.discarded == ["cover-1.png"]


def test_failed_commit_discards_new_cover_and_keeps_old(posts, covers) -> None:
    post = posts.add(
        Post(id="p1", title="t", summary="s", content="c", author_id="alice-id", cover="old.png")
    )

    class CommitFails:
        def modify(self, post_id, change):
            change(posts.get(post_id))
            raise RuntimeError("commit failed")

    with pytest.raises(RuntimeError):
        UpdatePostUseCase(posts=CommitFails(), covers=covers).execute(
            ALICE, post.id, UpdatePostInput(cover=_png())
        )

    assert covers.discarded == ["cover-1.png"]
    assert posts.get("p1").cover == "old.png"
