# topmark:header:start
#
#   project      : EnvMark
#   file         : ports.py
#   file_relpath : src/envmark/ports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dev-server port availability check.

The port comes from the ``PORT`` entry of the project's env file, read with
python-dotenv into a plain mapping. The process environment is left alone.
"""

from __future__ import annotations

import errno
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import dotenv_values

from envmark.config.logging import get_logger
from envmark.template.model import DEFAULT_PORT

if TYPE_CHECKING:
    from pathlib import Path

    from envmark.config.logging import EnvmarkLogger

logger: EnvmarkLogger = get_logger(__name__)

PORT_KEY = "PORT"
DEFAULT_HOST = "127.0.0.1"


@dataclass(frozen=True)
class PortConfig:
    """Where the dev server wants to listen.

    Attributes:
        port (int): Configured port.
        host (str): Interface to check.
        env_path (Path | None): Env file the port was read from, if any.
    """

    port: int
    host: str = DEFAULT_HOST
    env_path: Path | None = None


def resolve_port_config(env_path: Path, *, host: str = DEFAULT_HOST) -> PortConfig:
    """Read ``PORT`` from ``env_path``; fall back to the default port.

    Raises:
        ValueError: If ``PORT`` is set but is not a valid port number.
    """
    values = dotenv_values(env_path) if env_path.is_file() else {}
    raw = (values.get(PORT_KEY) or "").strip()
    if not raw:
        logger.debug("No %s in %s, using %d", PORT_KEY, env_path, DEFAULT_PORT)
        return PortConfig(port=DEFAULT_PORT, host=host, env_path=env_path)
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{PORT_KEY}={raw!r} in {env_path} is not a number") from None
    if not 0 < port < 65536:
        raise ValueError(f"{PORT_KEY}={port} in {env_path} is out of range")
    return PortConfig(port=port, host=host, env_path=env_path)


def is_port_available(config: PortConfig) -> bool:
    """Return True if ``config.port`` can be bound on ``config.host``.

    Raises:
        PermissionError: If binding is not allowed (e.g. a privileged port).
        OSError: For other bind failures.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((config.host, config.port))
        except OSError as exc:
            if exc.errno == errno.EADDRINUSE:
                logger.debug("Port %d on %s unavailable: %s", config.port, config.host, exc)
                return False
            raise
    return True
