# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter
from typing import Any

from flask import Blueprint, jsonify, request

from blog.application.interfaces import CoverUpload
from blog.application.use_cases.posts.create_post import CreatePostInput, CreatePostUseCase
from blog.application.use_cases.posts.read_posts import GetPostUseCase, ListPostsUseCase
from blog.application.use_cases.posts.update_post import UpdatePostInput, UpdatePostUseCase
from blog.infrastructure.auth import auth_required, current_identity
from blog.interfaces.http.dto.posts import CreatePostDTO, PostDTO, UpdatePostDTO
from blog.shared.errors.validation import validate_payload
from blog.shared.logging import logger


def _payload() -> dict[str, Any]:
    if request.form or request.files:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def _cover_upload() -> CoverUpload | None:
    file = request.files.get("file")
    if file is None or not file.filename:
        return None
    return CoverUpload(original_name=file.filename, stream=file.stream)


class PostsController:
    def __init__(
        self,
        *,
        create_use_case: CreatePostUseCase,
        list_use_case: ListPostsUseCase,
        get_use_case: GetPostUseCase,
        update_use_case: UpdatePostUseCase,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._update_use_case = update_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__)
        bp.add_url_rule("/post", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/post", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/post/<post_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/post/<post_id>", view_func=self.update, methods=["PUT"])
        return bp

    def list_posts(self):
        t0 = perf_counter()
        items = self._list_use_case.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([PostDTO.from_entity(post).to_json() for post in items])

    def get(self, post_id: str):
        post = self._get_use_case.execute(post_id)
        logger.debug(f"post.get: ok (post_id={post_id})")
        return jsonify(PostDTO.from_entity(post).to_json())

    @auth_required
    def create(self):
        t0 = perf_counter()
        identity = current_identity()
        dto = validate_payload(CreatePostDTO, _payload())

        post = self._create_use_case.execute(
            identity,
            CreatePostInput(
                title=dto.title,
                summary=dto.summary,
                content=dto.content,
                cover=_cover_upload(),
            ),
        )
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"post.create: ok (user_id={identity.user_id}, post_id={post.id}, "
            f"cover={'yes' if post.cover else 'no'}, dt_ms={dt:.0f})"
        )
        return jsonify(PostDTO.from_entity(post).to_json())

    @auth_required
    def update(self, post_id: str):
        t0 = perf_counter()
        identity = current_identity()
        dto = validate_payload(UpdatePostDTO, _payload())

        post = self._update_use_case.execute(
            identity,
            post_id,
            UpdatePostInput(
                title=dto.title,
                summary=dto.summary,
                content=dto.content,
                cover=_cover_upload(),
            ),
        )
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"post.update: ok (user_id={identity.user_id}, post_id={post_id}, dt_ms={dt:.0f})"
        )
        return jsonify(PostDTO.from_entity(post).to_json())
