# topmark:header:start
#
#   project      : EnvMark
#   file         : __init__.py
#   file_relpath : src/envmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark configuration: runtime settings and logging."""

from __future__ import annotations

from envmark.config.settings import DEFAULT_TEMPLATE_RELPATH, Settings

__all__ = ["DEFAULT_TEMPLATE_RELPATH", "Settings"]
