# topmark:header:start
#
#   project      : EnvMark
#   file         : __main__.py
#   file_relpath : src/envmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running EnvMark via ``python -m envmark``.

Delegates to :func:`envmark.cli.main.cli`, the same entry point as the
``envmark`` console script.
"""

from __future__ import annotations

from envmark.cli.main import cli

if __name__ == "__main__":
    cli()
