# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Summarise pydantic errors without echoing submitted values back.

    Field names are reported by alias (``userName``), as the client sent them.
    """
    fields: set[str] = set()
    errors: list[dict[str, Any]] = []

    for error in exc.errors(include_url=False, include_input=False):
        field = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        if field:
            fields.add(field)

        entry: dict[str, Any] = {
            "field": field or "unknown",
            "type": error.get("type", "value_error"),
            "message": error.get("msg", ""),
        }
        if "ctx" in error:
            entry["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(entry)

    return {"fields": sorted(fields), "errors": errors}


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


def validate_payload(model: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
    "validate_payload",
]
