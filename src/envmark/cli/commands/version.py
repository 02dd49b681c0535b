# topmark:header:start
#
#   project      : EnvMark
#   file         : version.py
#   file_relpath : src/envmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark `version` command.

Prints the current EnvMark version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from envmark.constants import ENVMARK_VERSION

if TYPE_CHECKING:
    from envmark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of EnvMark.",
)
def version_command() -> None:
    """Show the current version of EnvMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", logging.WARNING) > logging.INFO:
        console.print(console.styled(ENVMARK_VERSION, bold=True))
    else:
        console.print(console.styled("EnvMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(ENVMARK_VERSION, bold=True)}")
