# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/envmark/cli/options.py
#   project      : EnvMark
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for EnvMark.

This module centralizes reusable options (verbosity, color, template location)
and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from envmark.cli.errors import EnvmarkUsageError
from envmark.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class ColorMode(Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v`` / ``-q`` counts.

    Raises:
        EnvmarkUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags give TRACE, two give DEBUG, one gives INFO.
        One or more -q flags give ERROR. Default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise EnvmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
      2. **Environment**: ``FORCE_COLOR`` (set and not "0") → True;
         ``NO_COLOR`` (set) → False.
      3. **Auto**: ``stdout.isatty()``.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except Exception:
            stdout_isatty = False
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_template_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--template`` and ``--root`` options.

    Both are kept as raw strings; [`envmark.config.settings.Settings.resolve`][]
    turns them into paths.
    """
    f = click.option(
        "--template",
        "template",
        type=str,
        default=None,
        help="Env-snippet template (YAML or TOML). Default: quickstart/quickstart-login.yaml.",
    )(f)
    f = click.option(
        "--root",
        "root",
        type=click.Path(file_okay=False),
        default=None,
        help="Project root the env file is written to. Default: current directory.",
    )(f)
    return f
