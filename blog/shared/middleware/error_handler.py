# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from blog.shared.errors import register_error_handler
from blog.shared.logging import logger


def configure_error_handling(app: Flask, *, debug: bool = False) -> None:
    register_error_handler(app, debug=debug)

    @app.errorhandler(RequestEntityTooLarge)
    def _handle_too_large(_exc: RequestEntityTooLarge):
        limit = current_app.config.get("MAX_CONTENT_LENGTH")
        logger.warning(
            f"upload rejected: body over {limit} bytes on {request.method} {request.path}"
        )
        payload = {"error": "payload_too_large", "context": {"max_bytes": limit}}
        return jsonify(payload), HTTPStatus.REQUEST_ENTITY_TOO_LARGE
