# topmark:header:start
#
#   project      : EnvMark
#   file         : check_port.py
#   file_relpath : src/envmark/cli/commands/check_port.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark `check-port` command.

Fails when the dev-server port configured in the env file is already in use,
with hints on how to resolve it. Meant to run before starting the dev server.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from envmark.cli.errors import (
    EnvmarkConfigError,
    EnvmarkIOError,
    EnvmarkPermissionDeniedError,
    EnvmarkPortInUseError,
)
from envmark.cli.options import CONTEXT_SETTINGS, common_template_options
from envmark.config.settings import Settings
from envmark.ports import DEFAULT_HOST, is_port_available, resolve_port_config
from envmark.template import env_file_name_or_default

if TYPE_CHECKING:
    from envmark.cli.console import ConsoleLike

PORT_IN_USE_HINT = """\
The port {port} that is configured in Auth0 is currently in use.

To resolve this issue:
1. Free up port {port} by stopping the application using it, OR
2. Configure URLs with a new port in your Auth0 application settings:
   - Allowed Callback URLs
   - Allowed Logout URLs
   - Allowed Web Origins
   Then update the PORT environment variable accordingly"""


@click.command(
    name="check-port",
    help="Check that the dev-server port from the env file is free.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--host",
    "host",
    type=str,
    default=DEFAULT_HOST,
    show_default=True,
    help="Interface to check.",
)
@common_template_options
def check_port_command(*, host: str, template: str | None, root: str | None) -> None:
    """Check the configured port.

    Args:
        host (str): Interface to bind for the check.
        template (str | None): Template naming the env file.
        root (str | None): Project root.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings = Settings.resolve(root=root, template=template)
    env_path = settings.env_path(env_file_name_or_default(settings.template_path))
    try:
        port_config = resolve_port_config(env_path, host=host)
    except ValueError as exc:
        raise EnvmarkConfigError(str(exc)) from exc

    try:
        available = is_port_available(port_config)
    except PermissionError as exc:
        raise EnvmarkPermissionDeniedError(
            f"Not allowed to bind {host}:{port_config.port}: {exc}"
        ) from exc
    except OSError as exc:
        raise EnvmarkIOError(f"Cannot check {host}:{port_config.port}: {exc}") from exc
    if not available:
        raise EnvmarkPortInUseError(PORT_IN_USE_HINT.format(port=port_config.port))

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.WARNING:
        console.print(console.styled(f"Port {port_config.port} is available.", fg="green"))
