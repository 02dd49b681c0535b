# topmark:header:start
#
#   project      : EnvMark
#   file         : model.py
#   file_relpath : src/envmark/envfile/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line model for dotenv-style files.

An env file is handled as a sequence of [`EnvLine`][envmark.envfile.model.EnvLine]
records. Every record keeps the raw text it was parsed from, so rendering a
parsed file gives back the original bytes for any line the merger did not
touch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(str, Enum):
    """Classification of a single env-file line.

    Members:
      EMPTY: Blank or whitespace-only line.
      COMMENT: Line whose first non-blank character is ``#``.
      ACTIVE: ``KEY=value`` assignment with a non-empty key.
      OPAQUE: Any other non-blank line (no ``=``, or an empty key). Never
        managed, always written back verbatim.
    """

    EMPTY = "empty"
    COMMENT = "comment"
    ACTIVE = "active"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class EnvLine:
    """One line of an env file.

    Attributes:
        kind (LineKind): Line classification.
        text (str): Raw line text, without the line terminator.
        key (str | None): Trimmed key (ACTIVE only).
        value (str | None): Raw value after the first ``=`` (ACTIVE only).
    """

    kind: LineKind
    text: str
    key: str | None = None
    value: str | None = None

    @property
    def trimmed_value(self) -> str | None:
        """Value with surrounding whitespace removed (ACTIVE only)."""
        return None if self.value is None else self.value.strip()

    @property
    def is_active(self) -> bool:
        return self.kind == LineKind.ACTIVE

    @classmethod
    def empty(cls, text: str = "") -> EnvLine:
        return cls(LineKind.EMPTY, text)

    @classmethod
    def comment(cls, text: str) -> EnvLine:
        return cls(LineKind.COMMENT, text)

    @classmethod
    def active(cls, key: str, value: str) -> EnvLine:
        """Build a fresh ``KEY=value`` line."""
        return cls(LineKind.ACTIVE, f"{key}={value}", key=key, value=value)

    def commented(self) -> EnvLine:
        """Return this line turned into a comment, keeping the raw text verbatim.

        Only ACTIVE lines are converted; any other line is returned unchanged so
        that a comment is never prefixed twice.
        """
        if not self.is_active:
            return self
        return EnvLine.comment(f"# {self.text}")


class StatusKind(str, Enum):
    """Outcome for one managed key."""

    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"

    @property
    def message(self) -> str:
        """Human-readable description used in CLI reports."""
        return _STATUS_MESSAGES[self]


_STATUS_MESSAGES: dict[StatusKind, str] = {
    StatusKind.ADDED: "adding new value",
    StatusKind.UPDATED: "commenting previous value and adding new",
    StatusKind.UNCHANGED: "already up to date",
}


@dataclass(frozen=True)
class VariableStatus:
    """Reconciliation result for one managed key.

    Attributes:
        key (str): The managed key.
        status (StatusKind): Added, updated or unchanged.
        previous (str | None): Latest prior trimmed value, ``None`` if the key had
            no active definition.
        target (str): The value the key resolves to from the template.
    """

    key: str
    status: StatusKind
    previous: str | None
    target: str

    @property
    def changed(self) -> bool:
        return self.status != StatusKind.UNCHANGED
