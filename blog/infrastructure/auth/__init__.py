# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import AuthGate, auth_required, current_identity

__all__ = ["AuthGate", "auth_required", "current_identity"]
