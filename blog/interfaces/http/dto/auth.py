# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    username: str = Field(alias="userName", min_length=4, max_length=64)
    password: str = Field(min_length=6, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_RE.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username may contain only letters, digits, '_', '.' and '-'",
                {"pattern": _USERNAME_RE.pattern},
            )
        return value


class LoginRequestDTO(BaseModel):
    # Name rules apply at registration only; an unknown name is user_not_found
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(alias="userName", min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=128)


class UserDTO(BaseModel):
    id: str
    username: str = Field(serialization_alias="userName")


class ProfileDTO(BaseModel):
    user_id: str = Field(serialization_alias="userId")
    username: str = Field(serialization_alias="userName")
    iat: int | None = None
    exp: int | None = None
