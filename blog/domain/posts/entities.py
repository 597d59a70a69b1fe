# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Blog post entity."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class Post:
    """A post written by ``author_id``; the author never changes."""

    id: str
    title: str
    summary: str
    content: str
    author_id: str
    cover: str | None = None
    author_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def revise(
        self,
        *,
        title: str | None = None,
        summary: str | None = None,
        content: str | None = None,
        cover: str | None = None,
        now: datetime | None = None,
    ) -> Post:
        """Return a copy with the given fields changed and ``updated_at`` bumped.

        ``None`` means "leave as is", so a cover can be replaced but not removed.
        """

        return replace(
            self,
            title=self.title if title is None else title,
            summary=self.summary if summary is None else summary,
            content=self.content if content is None else content,
            cover=self.cover if cover is None else cover,
            updated_at=now or datetime.now(UTC),
        )
