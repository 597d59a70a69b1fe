# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ownership rule for mutating posts."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .exceptions import NotPostAuthorError


class Principal(Protocol):
    @property
    def user_id(self) -> str: ...


class Authored(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def author_id(self) -> str: ...


class Access(str, Enum):
    ALLOW = "allow"


def authorize(identity: Principal, resource: Authored) -> Access:
    """Allow the mutation only when ``identity`` wrote ``resource``.

    The resource must already be resolved; a missing resource is the caller's
    ``PostNotFoundError``, never a policy outcome.
    """

    if identity.user_id != resource.author_id:
        raise NotPostAuthorError(resource.id)
    return Access.ALLOW


__all__ = ["Access", "Authored", "Principal", "authorize"]
