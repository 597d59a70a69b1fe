# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error hierarchy rendered by the HTTP layer as ``{"error": code, "context": ...}``.

Subclasses pin ``code`` and ``status`` as class attributes; instances only
carry the context that makes one failure differ from another.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def __str__(self) -> str:
        if not self.context:
            return self.code
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.code} ({details})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class AuthenticationError(DomainError):
    code = "unauthenticated"
    status = HTTPStatus.UNAUTHORIZED


class PermissionDeniedError(DomainError):
    code = "forbidden"
    status = HTTPStatus.FORBIDDEN


class NotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND


class ConflictError(DomainError):
    code = "conflict"
    status = HTTPStatus.CONFLICT


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=status or HTTPStatus.INTERNAL_SERVER_ERROR,
            context=context,
        )


class ValidationError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )
