# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Blog backend entrypoint.

Run with:
  python -m blog
"""

import os

from blog.app import create_app


def main() -> None:
    host = os.getenv("BLOG_HOST", "0.0.0.0")
    port = int(os.getenv("BLOG_PORT", "4000"))
    debug = os.getenv("BLOG_DEBUG", "false").lower() in {"1", "true", "yes", "y"}
    create_app().run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
