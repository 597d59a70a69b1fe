# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Protocol


@dataclass(slots=True, frozen=True)
class CoverUpload:
    original_name: str
    stream: BinaryIO


class CoverStorage(Protocol):
    def store(self, upload: CoverUpload) -> str:
        """Persist the upload and return its path relative to the uploads root."""
        ...

    def discard(self, path: str) -> None:
        """Remove a stored upload; a path that is already gone is not an error."""
        ...
