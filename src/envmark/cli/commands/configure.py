# topmark:header:start
#
#   project      : EnvMark
#   file         : configure.py
#   file_relpath : src/envmark/cli/commands/configure.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark `configure` command.

Writes the managed keys of the env-snippet template into the project's env
file. Previous values of managed keys are kept as comments; unmanaged keys,
comments and blank lines are left untouched. When every managed key already
has its target value the file is not rewritten.

Examples:
  Write the Auth0 settings for the sample app:

    $ envmark configure --domain my-tenant.auth0.com --clientId abc123

  Use another port and preview without writing:

    $ envmark configure --domain my-tenant.auth0.com --clientId abc123 --port 5000 --dry-run
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from envmark.cli.errors import (
    EnvmarkConfigError,
    EnvmarkFileNotFoundError,
    EnvmarkIOError,
    EnvmarkPermissionDeniedError,
)
from envmark.cli.options import CONTEXT_SETTINGS, common_template_options
from envmark.cli.validators import require_option, validate_port
from envmark.config.logging import get_logger
from envmark.config.settings import Settings
from envmark.envfile.merger import plan_update
from envmark.envfile.model import StatusKind
from envmark.template import (
    INPUT_CLIENT_ID,
    INPUT_DOMAIN,
    INPUT_PORT,
    TemplateError,
    TemplateNotFoundError,
    load_template,
)
from envmark.utils.file import read_text_or_none, replace_file

if TYPE_CHECKING:
    from envmark.cli.console import ConsoleLike
    from envmark.envfile.merger import UpdatePlan
    from envmark.template import Template

logger = get_logger(__name__)

_STATUS_STYLES: dict[StatusKind, str] = {
    StatusKind.ADDED: "green",
    StatusKind.UPDATED: "yellow",
    StatusKind.UNCHANGED: "bright_black",
}


def _load_template(settings: Settings) -> Template:
    try:
        return load_template(settings.template_path)
    except TemplateNotFoundError as exc:
        raise EnvmarkFileNotFoundError(str(exc)) from exc
    except TemplateError as exc:
        raise EnvmarkConfigError(str(exc)) from exc


def render_status_report(console: ConsoleLike, plan: UpdatePlan) -> None:
    """Print one line per managed key describing what happened to it."""
    console.print("Config keys state:")
    for item in plan.statuses:
        message = console.styled(item.status.message, fg=_STATUS_STYLES[item.status])
        console.print(f"  {item.key}: {message}")


@click.command(
    name="configure",
    help="Write the template's managed keys into the project env file.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--domain", "domain", type=str, default=None, help="Auth0 tenant domain.")
@click.option(
    "--clientId",
    "--client-id",
    "client_id",
    type=str,
    default=None,
    help="Auth0 application client ID.",
)
@click.option(
    "--port",
    "port",
    type=str,
    default=None,
    help="Dev-server port. Default: the template's declared default.",
)
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Report what would change without writing the env file.",
)
@common_template_options
def configure_command(
    *,
    domain: str | None,
    client_id: str | None,
    port: str | None,
    dry_run: bool,
    template: str | None,
    root: str | None,
) -> None:
    """Reconcile the env file with the template.

    Args:
        domain (str | None): Value for the ``auth0Domain`` input (required).
        client_id (str | None): Value for the ``auth0ClientId`` input (required).
        port (str | None): Value for the ``port`` input; falls back to the template default.
        dry_run (bool): Compute and report only.
        template (str | None): Template path (relative to ``root`` unless absolute).
        root (str | None): Project root; defaults to the current directory.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    # Validate everything before touching the filesystem.
    domain = require_option(domain, "--domain")
    client_id = require_option(client_id, "--clientId")
    port = validate_port(port)

    settings = Settings.resolve(root=root, template=template)
    tmpl = _load_template(settings)
    env_path = settings.env_path(tmpl.file_name)

    replacements: dict[str, str | None] = {
        INPUT_DOMAIN: domain,
        INPUT_CLIENT_ID: client_id,
        INPUT_PORT: port or tmpl.port_default,
    }
    logger.debug("Reconciling %s with %s", env_path, settings.template_path)

    try:
        existing = read_text_or_none(env_path)
    except PermissionError as exc:
        raise EnvmarkPermissionDeniedError(f"Cannot read {env_path}: {exc}") from exc
    except OSError as exc:
        raise EnvmarkIOError(f"Cannot read {env_path}: {exc}") from exc

    plan = plan_update(existing, tmpl, replacements)
    # -q keeps errors only
    quiet = ctx.obj.get("verbosity_level", logging.WARNING) > logging.WARNING

    if plan.content is None:
        message = f"No changes needed, file {tmpl.file_name} unchanged"
    elif dry_run:
        message = f"Dry run: {tmpl.file_name} would be updated"
    else:
        try:
            replace_file(env_path, plan.content)
        except PermissionError as exc:
            raise EnvmarkPermissionDeniedError(f"Cannot write {env_path}: {exc}") from exc
        except OSError as exc:
            raise EnvmarkIOError(f"Cannot write {env_path}: {exc}") from exc
        message = f"Configuration has been written to: {tmpl.file_name}"

    if quiet:
        return
    console.print(message)
    render_status_report(console, plan)
