# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from blog.infrastructure.container import Container
from blog.infrastructure.db import init_db
from blog.shared.config import AppConfig, load_config
from blog.shared.logging import logger, setup_logging
from blog.shared.middleware.error_handler import configure_error_handling
from blog.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    """Build the Flask app from ``config`` (environment config when omitted).

    The database engine is process-wide and always built from the environment
    (``DATABASE_URL``); every other setting comes from ``config``.
    """
    config = config or load_config()
    setup_logging("DEBUG" if config.debug_logging else None)
    if config.database.url != load_config().database.url:
        logger.warning("create_app: config.database.url ignored, engine uses DATABASE_URL")
    init_db()

    app = Flask(__name__)
    configure_error_handling(app, debug=config.debug_logging)
    configure_request_logging(app, debug=config.debug_logging)

    app.config.update(
        SECRET_KEY=config.secret_key,
        MAX_CONTENT_LENGTH=config.uploads.max_bytes,
    )

    CORS(app, origins=config.security.origins(), supports_credentials=True)

    container = Container(config)
    app.extensions["blog.container"] = container
    container.auth_gate.init_app(app)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app
