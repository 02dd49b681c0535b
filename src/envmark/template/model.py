# topmark:header:start
#
#   project      : EnvMark
#   file         : model.py
#   file_relpath : src/envmark/template/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template model.

A template is the declarative source of truth for an env snippet: which keys
are managed, the value pattern of each key (with placeholder tokens), the
declared inputs and their defaults, and the target file name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

# Input keys the CLI fills from --domain / --clientId / --port.
INPUT_DOMAIN: Final[str] = "auth0Domain"
INPUT_CLIENT_ID: Final[str] = "auth0ClientId"
INPUT_PORT: Final[str] = "port"

DEFAULT_PORT: Final[int] = 3000
DEFAULT_ENV_FILE_NAME: Final[str] = ".env.local"


class TemplateError(Exception):
    """A template is malformed or misses a required field."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{message} in {path}" if path is not None else message)


class TemplateNotFoundError(TemplateError):
    """The template file does not exist."""


@dataclass(frozen=True)
class Placeholder:
    """A literal token in a template value.

    Attributes:
        token (str): Text to replace, matched literally.
        input_key (str | None): Name of the replacement value; ``None`` when the
            template gives no usable mapping (the token is then replaced by "").
    """

    token: str
    input_key: str | None

    @classmethod
    def from_config(cls, token: str, config: Any) -> Placeholder:
        """Build a placeholder from its template entry.

        Accepts ``{"inputKey": "name"}`` or a plain ``"name"`` string.
        """
        if isinstance(config, dict) and config.get("inputKey"):
            return cls(token, str(config["inputKey"]))
        if isinstance(config, str) and config:
            return cls(token, config)
        return cls(token, None)

    def replacement(self, values: Mapping[str, str | None]) -> str:
        if self.input_key is None:
            return ""
        return values.get(self.input_key) or ""


@dataclass(frozen=True)
class Template:
    """A loaded env-snippet template.

    Attributes:
        file_name (str): Target env file name, relative to the project root.
        content (str): Env snippet with placeholder tokens.
        placeholders (tuple[Placeholder, ...]): Placeholders in declaration order.
        inputs (Mapping[str, Any]): Declared inputs (``description``, ``default``...).
        source (Path | None): File the template was read from, if any.
    """

    file_name: str
    content: str
    placeholders: tuple[Placeholder, ...] = ()
    inputs: Mapping[str, Any] = field(default_factory=dict)
    source: Path | None = None

    def input_default(self, name: str) -> Any:
        """Return the declared default for input ``name``, or ``None``."""
        spec = self.inputs.get(name)
        if isinstance(spec, dict):
            return spec.get("default")
        return None

    @property
    def port_default(self) -> str:
        default = self.input_default(INPUT_PORT)
        return str(default) if default not in (None, "") else str(DEFAULT_PORT)
