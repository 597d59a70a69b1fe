from datetime import UTC, datetime

from blog.domain import Post


def _post() -> Post:
    created = datetime(2024, 5, 1, tzinfo=UTC)
    return Post(
        id="p1",
        title="Title",
        summary="Summary",
        content="Content",
        author_id="alice-id",
        cover="old.png",
        created_at=created,
        updated_at=created,
    )


def test_revise_changes_only_given_fields() -> None:
    now = datetime(2024, 6, 1, tzinfo=UTC)
    revised = _post().revise(summary="New summary", now=now)

    assert revised.summary == "New summary"
    assert revised.title == "Title"
    assert revised.content == "Content"
    assert revised.cover == "old.png"
    assert revised.updated_at == now
    assert revised.created_at == _post().created_at


def test_revise_keeps_author() -> None:
    revised = _post().revise(title="x", content="y", cover="new.jpg")

    assert revised.author_id == "alice-id"
    assert revised.cover == "new.jpg"
