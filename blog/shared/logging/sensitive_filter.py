# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction of credentials and session tokens from log messages."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)([\w\-]{8,})"), rf"\1{_REDACTED}"),
    # Session tokens: bearer headers, token=... pairs, bare JWTs
    (re.compile(r"(bearer\s+)([\w\-.]{20,})", re.IGNORECASE), rf"\1{_REDACTED}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)([\w\-.]{20,})"), rf"\1{_REDACTED}"),
    (re.compile(r"\beyJ[\w\-]+\.[\w\-]+\.[\w\-]+"), "***JWT***"),
    # Passwords and their hashes
    (re.compile(r"(password(?:_hash)?\s*[:=]\s*['\"]?)([^'\"\s,}]+)", re.IGNORECASE), rf"\1{_REDACTED}"),
    (re.compile(r"\b(scrypt|pbkdf2):[^\s'\"]+"), rf"\1:{_REDACTED}"),
    # Database URLs with credentials
    (re.compile(r"(postgresql|postgres|mysql|mariadb)(\+\w+)?://([^:/\s]+):([^@\s]+)@"), rf"\1\2://\3:{_REDACTED}@"),
    # Raw headers
    (re.compile(r"((?:authorization|cookie)\s*:\s*['\"]?)([^'\"]{10,})", re.IGNORECASE), rf"\1{_REDACTED}"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: rewrites the message in place and never drops the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
