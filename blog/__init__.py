# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Blog backend: session authentication, post ownership and the JSON API."""
