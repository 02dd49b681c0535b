# topmark:header:start
#
#   project      : EnvMark
#   file         : validators.py
#   file_relpath : src/envmark/cli/validators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validators for CLI option values."""

from __future__ import annotations

from envmark.cli.errors import EnvmarkUsageError

_LINE_BREAKS = frozenset("\n\r")


def require_option(value: str | None, option_name: str) -> str:
    """Return ``value`` or raise a usage error naming the missing option.

    Blank values count as missing. Values are written as one env-file line,
    so line breaks are rejected.
    """
    if value is None or not value.strip():
        raise EnvmarkUsageError(f"{option_name} argument is required")
    if _LINE_BREAKS.intersection(value):
        raise EnvmarkUsageError(f"{option_name} argument must not contain line breaks")
    return value


def validate_port(value: str | None) -> str | None:
    """Check that ``value`` is a plain decimal port number.

    ``int(value)`` must give back the same text, so ``"08"``, ``"3000.0"`` or
    ``" 80"`` are rejected.

    Returns:
        str | None: ``value`` unchanged (``None`` when not given).

    Raises:
        EnvmarkUsageError: If the value is not a valid number.
    """
    if value is None:
        return None
    try:
        number = int(value, 10)
    except ValueError:
        number = None
    if number is None or str(number) != value or not 0 < number < 65536:
        raise EnvmarkUsageError("--port argument must be a valid number")
    return value
