# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cover image storage adapter."""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from uuid import uuid4

from blog.application.interfaces import CoverStorage, CoverUpload
from blog.shared.errors import InfrastructureError
from blog.shared.logging import logger

_EXT_RE = re.compile(r"^[a-z0-9]{1,10}$")


def _extension(original_name: str) -> str:
    if "." not in original_name:
        return ""
    ext = original_name.rsplit(".", 1)[1].lower()
    return ext if _EXT_RE.match(ext) else ""


class LocalCoverStorage(CoverStorage):
    """Stores uploads on local filesystem under a random name that keeps the extension."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, relative_path: str) -> Path:
        path = (self._root / relative_path).resolve()
        if not path.is_relative_to(self._root.resolve()):
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def store(self, upload: CoverUpload) -> str:
        ext = _extension(upload.original_name)
        name = f"{uuid4().hex}.{ext}" if ext else uuid4().hex
        file_path = self._resolve(name)
        try:
            with open(file_path, "wb") as f:
                shutil.copyfileobj(upload.stream, f)
        except OSError as exc:
            logger.error(f"storage: write failed path={file_path} err={type(exc).__name__}")
            raise InfrastructureError("cover_storage_failed") from exc
        logger.debug(f"storage: cover stored path={file_path} size={file_path.stat().st_size}")
        return name

    def discard(self, path: str) -> None:
        file_path = self._resolve(path)
        file_path.unlink(missing_ok=True)
        logger.debug(f"storage: cover removed path={file_path}")


__all__ = ["LocalCoverStorage"]
