# topmark:header:start
#
#   project      : EnvMark
#   file         : __init__.py
#   file_relpath : src/envmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark package.

EnvMark keeps a project's dotenv file in step with an env-snippet template. It
adds and updates managed keys, keeps superseded values as comments, and leaves
everything else in the file alone. It also checks that the configured dev-server
port is free.
"""

from __future__ import annotations
