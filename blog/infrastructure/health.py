# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy import text

from blog.infrastructure.db import ENGINE


def check_database() -> bool:
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True


def check_uploads(directory: Path) -> bool:
    """Cover uploads need an existing, writable directory."""
    return directory.is_dir() and os.access(directory, os.W_OK)


def collect_health(uploads_dir: Path) -> dict[str, object]:
    status: dict[str, object] = {"ok": True}
    try:
        check_database()
        status["database"] = "ok"
    except Exception as exc:
        status["ok"] = False
        status["database"] = f"error: {type(exc).__name__}"

    if check_uploads(uploads_dir):
        status["uploads"] = "ok"
    else:
        status["ok"] = False
        status["uploads"] = "not writable"
    return status


__all__ = ["check_database", "check_uploads", "collect_health"]
