# topmark:header:start
#
#   project      : EnvMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the EnvMark test suite.

Sets up logging for test runs and provides fixtures that lay out a small
project (template + env file) in a temporary directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from envmark.config import logging

F = TypeVar("F", bound=Callable[..., object])

DEFAULT_PORT_IN_TEMPLATE = "3000"

TEMPLATE_YAML = """\
inputs:
  domain:
    description: Auth0 tenant domain
  clientId:
    description: Auth0 application client ID
  port:
    description: Dev-server port
    default: 3000
placeholders:
  "{{DOMAIN}}":
    inputKey: auth0Domain
  "{{CLIENT_ID}}":
    inputKey: auth0ClientId
  "{{PORT}}":
    inputKey: port
envSnippet:
  fileName: .env.local
  content: |
    VITE_AUTH0_DOMAIN={{DOMAIN}}
    VITE_AUTH0_CLIENT_ID={{CLIENT_ID}}
    PORT={{PORT}}
"""


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_envmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``ENVMARK_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project root holding ``quickstart/quickstart-login.yaml``.

    Returns:
        Path: The project root (no env file yet).
    """
    quickstart = tmp_path / "quickstart"
    quickstart.mkdir()
    (quickstart / "quickstart-login.yaml").write_text(TEMPLATE_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def env_file(project: Path) -> Path:
    """Path of the env file the template targets (not created)."""
    return project / ".env.local"
