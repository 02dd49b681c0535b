# topmark:header:start
#
#   project      : EnvMark
#   file         : settings.py
#   file_relpath : src/envmark/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved runtime settings.

Commands resolve a [`Settings`][envmark.config.settings.Settings] once from
their options and hand it to the code that needs it. Nothing downstream reads
the process environment for configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_TEMPLATE_RELPATH: Final[Path] = Path("quickstart") / "quickstart-login.yaml"


@dataclass(frozen=True)
class Settings:
    """Paths EnvMark works with.

    Attributes:
        root (Path): Project root; env file names are resolved against it.
        template_path (Path): Template to read.
    """

    root: Path
    template_path: Path

    @classmethod
    def resolve(cls, *, root: str | Path | None, template: str | Path | None) -> Settings:
        """Build settings from raw option values.

        A relative ``template`` is taken relative to ``root``; ``root`` defaults
        to the current working directory.
        """
        root_path = Path(root) if root else Path.cwd()
        template_path = Path(template) if template else DEFAULT_TEMPLATE_RELPATH
        if not template_path.is_absolute():
            template_path = root_path / template_path
        return cls(root=root_path, template_path=template_path)

    def env_path(self, file_name: str) -> Path:
        """Return the env file path for a template ``fileName``."""
        return self.root / file_name
