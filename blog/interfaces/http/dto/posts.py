# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog.domain.posts.entities import Post


class CreatePostDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=256)
    summary: str = Field(min_length=1, max_length=1024)
    content: str = Field(min_length=1)


class UpdatePostDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=256)
    summary: str | None = Field(None, min_length=1, max_length=1024)
    content: str | None = Field(None, min_length=1)


class AuthorDTO(BaseModel):
    id: str
    username: str | None = Field(None, serialization_alias="userName")


class PostDTO(BaseModel):
    id: str
    title: str
    summary: str
    content: str
    cover: str | None
    author: AuthorDTO
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, post: Post) -> PostDTO:
        return cls(
            id=post.id,
            title=post.title,
            summary=post.summary,
            content=post.content,
            cover=post.cover,
            author=AuthorDTO(id=post.author_id, username=post.author_name),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
