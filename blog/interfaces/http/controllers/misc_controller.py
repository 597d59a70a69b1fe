# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, jsonify, send_from_directory

from blog.infrastructure.health import collect_health
from blog.shared.logging import logger


class MiscController:
    def __init__(self, *, uploads_dir: Path) -> None:
        self._uploads_dir = uploads_dir

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/test", view_func=self.test, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/uploads/<path:filename>", view_func=self.upload, methods=["GET"])
        return bp

    def test(self):
        return jsonify("test ok")

    def health(self):
        status = collect_health(self._uploads_dir)
        if not status["ok"]:
            logger.warning(f"health: degraded {status}")
        return jsonify(status), 200 if status["ok"] else 503

    def upload(self, filename: str):
        return send_from_directory(self._uploads_dir.resolve(), filename)
