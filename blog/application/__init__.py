# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import CoverStorage, CoverUpload
from .services.session_tokens import SessionTokenCodec

__all__ = [
    "CoverStorage",
    "CoverUpload",
    "SessionTokenCodec",
]
