from __future__ import annotations

import pytest

from blog.domain.posts.entities import Post
from blog.domain.posts.exceptions import NotPostAuthorError
from blog.domain.posts.policy import Access, authorize
from blog.domain.users.entities import SessionClaim


def _post(author_id: str) -> Post:
    return Post(id="p1", title="t", summary="s", content="c", author_id=author_id)


def test_author_is_allowed() -> None:
    assert authorize(SessionClaim(user_id="alice-id", username="alice"), _post("alice-id")) is Access.ALLOW


@pytest.mark.parametrize("user_id", ["bob-id", "", "ALICE-ID", "alice-id "])
def test_anyone_else_is_forbidden(user_id: str) -> None:
    with pytest.raises(NotPostAuthorError) as exc_info:
        authorize(SessionClaim(user_id=user_id, username="bob"), _post("alice-id"))

    assert exc_info.value.code == "not_post_author"
    assert int(exc_info.value.status) == 403
    assert exc_info.value.context == {"post_id": "p1"}


def test_username_does_not_grant_access() -> None:
    post = Post(
        id="p1", title="t", summary="s", content="c", author_id="alice-id", author_name="alice"
    )

    with pytest.raises(NotPostAuthorError):
        authorize(SessionClaim(user_id="imposter-id", username="alice"), post)
