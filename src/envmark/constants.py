# topmark:header:start
#
#   project      : EnvMark
#   file         : constants.py
#   file_relpath : src/envmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ENVMARK_VERSION: str = get_version("envmark")
