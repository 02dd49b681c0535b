# topmark:header:start
#
#   project      : EnvMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running EnvMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given project
root before invoking the Click CLI, so the default template location
(``quickstart/quickstart-login.yaml``) and the env file resolve inside the
temporary project, as they do when a developer runs EnvMark from the repo root.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from envmark.cli.exit_codes import ExitCode
from envmark.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files in a temporary
    project (``--help``, ``version``) or when all paths are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def configure_argv(domain: str | None, client_id: str | None, port: str | None = None) -> list[str]:
    """Build ``--no-color configure ...`` arguments, skipping ``None`` values."""
    argv = ["--no-color", "configure"]
    if domain is not None:
        argv += ["--domain", domain]
    if client_id is not None:
        argv += ["--clientId", client_id]
    if port is not None:
        argv += ["--port", port]
    return argv


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
