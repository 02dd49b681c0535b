# topmark:header:start
#
#   project      : EnvMark
#   file         : errors.py
#   file_relpath : src/envmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the EnvMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library code raises domain exceptions (see
    [`envmark.template.TemplateError`][]) which commands translate here.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from envmark.cli.exit_codes import ExitCode


class EnvmarkError(click.ClickException):
    """Base class for all EnvMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, ctx: click.Context | None = None) -> None:
        super().__init__(message)
        # Click pops the context before calling show(); keep a handle on it.
        self.ctx: click.Context | None = ctx or click.get_current_context(silent=True)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def _console(self) -> Any:
        if self.ctx is not None and isinstance(getattr(self.ctx, "obj", None), dict):
            return self.ctx.obj.get("console")
        return None

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        console = self._console()
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class EnvmarkUsageError(EnvmarkError):
    """Missing or malformed command-line arguments.

    The message is followed by the command's usage line.
    """

    exit_code = ExitCode.USAGE_ERROR

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error followed by the usage text."""
        console = self._console()
        usage = self.ctx.get_usage() if self.ctx is not None else ""
        if console is None:
            click.echo(f"Error: {self.format_message()}", err=True)
            if usage:
                click.echo(usage, err=True)
            return
        console.error(f"Error: {self.format_message()}")
        if usage:
            console.warn(usage)


class EnvmarkConfigError(EnvmarkError):
    """Template errors (missing/invalid/malformed template)."""

    exit_code = ExitCode.CONFIG_ERROR


class EnvmarkFileNotFoundError(EnvmarkError):
    """The template path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EnvmarkPermissionDeniedError(EnvmarkError):
    """Insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class EnvmarkIOError(EnvmarkError):
    """I/O errors writing the env file."""

    exit_code = ExitCode.IO_ERROR


class EnvmarkPortInUseError(EnvmarkError):
    """The configured dev-server port is already bound by another process."""

    exit_code = ExitCode.FAILURE
