# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
from time import perf_counter

from flask import Flask, g, request

from blog.shared.logging import (
    clear_request_context,
    get_correlation_id,
    logger,
    set_correlation_id,
)

_SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _masked_headers() -> dict[str, str]:
    # session cookie and bearer tokens are logged as a short digest only
    masked = {}
    for key, value in request.headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            masked[key] = f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            masked[key] = value
    return masked


def _upload_summary() -> str:
    if not request.files:
        return "none"
    return ",".join(
        f"{field}:{storage.mimetype or '?'}" for field, storage in request.files.items()
    )


def configure_request_logging(app: Flask, *, debug: bool = False) -> None:
    """With ``debug`` the start line carries masked headers and POST/PUT ends list uploads."""

    @app.before_request
    def _before_request() -> None:
        set_correlation_id(request.headers.get("X-Request-ID") or secrets.token_urlsafe(8))
        g.request_started = perf_counter()

        if debug:
            logger.info(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"content_length={request.content_length or 0}, headers={_masked_headers()}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _after_request(response):
        elapsed_ms = (perf_counter() - g.get("request_started", perf_counter())) * 1000
        message = (
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, dt_ms={elapsed_ms:.0f}"
        )
        if debug and request.method in ("POST", "PUT"):
            message += f", uploads={_upload_summary()}"
        logger.info(message)
        response.headers.setdefault("X-Request-ID", get_correlation_id())
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_request_context()


__all__ = ["configure_request_logging"]
