# topmark:header:start
#
#   project      : EnvMark
#   file         : merger.py
#   file_relpath : src/envmark/envfile/merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reconcile an existing env file with a template of managed keys.

The merge is a pure computation on line sequences:

1. parse the existing file and the template snippet,
2. collect the managed keys and resolve their target values,
3. compare with the latest active value of each key already in the file,
4. when anything differs, comment out every active managed line (keeping its
   raw text) and append a timestamped block with the new values.

Nothing here touches the filesystem. [`plan_update`][envmark.envfile.merger.plan_update]
returns the complete new content, so callers write once or not at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from envmark.config.logging import get_logger
from envmark.envfile.model import EnvLine, StatusKind, VariableStatus
from envmark.envfile.parser import parse_lines, render

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from envmark.config.logging import EnvmarkLogger
    from envmark.template.model import Placeholder, Template

logger: EnvmarkLogger = get_logger(__name__)

STAMP_PREFIX = "# added by envmark at"


def compute_managed_keys(template_lines: Iterable[EnvLine]) -> frozenset[str]:
    """Return the keys of the template's active lines."""
    return frozenset(line.key for line in template_lines if line.is_active and line.key)


def substitute(value: str, replacements: Sequence[tuple[str, str]]) -> str:
    """Replace every occurrence of each token, in order, then trim.

    Args:
        value (str): Raw template value.
        replacements (Sequence[tuple[str, str]]): ``(token, replacement)`` pairs
            applied one after the other.

    Returns:
        str: The substituted, trimmed value.
    """
    for token, replacement in replacements:
        if token:
            value = value.replace(token, replacement)
    return value.strip()


def resolve_target_values(
    template_lines: Iterable[EnvLine],
    placeholders: Sequence[Placeholder],
    replacement_values: Mapping[str, str | None],
) -> dict[str, str]:
    """Compute the final value of each managed key.

    Args:
        template_lines (Iterable[EnvLine]): Parsed template snippet.
        placeholders (Sequence[Placeholder]): Placeholders in declaration order.
        replacement_values (Mapping[str, str | None]): Values by input key; a
            missing or ``None`` value substitutes as "".

    Returns:
        dict[str, str]: Target values in template key order.
    """
    pairs = [(p.token, p.replacement(replacement_values)) for p in placeholders]
    targets: dict[str, str] = {}
    for line in template_lines:
        if line.is_active and line.key:
            targets[line.key] = substitute(line.value or "", pairs)
    return targets


def compute_active_values(
    existing_lines: Sequence[EnvLine],
    managed_keys: frozenset[str],
) -> dict[str, str]:
    """Return the latest trimmed value of each managed key present in the file.

    Later definitions shadow earlier ones, as they would when the file is loaded.
    """
    active: dict[str, str] = {}
    for line in reversed(existing_lines):
        if line.is_active and line.key in managed_keys and line.key not in active:
            active[line.key] = line.trimmed_value or ""
    return active


def diff_status(
    target_values: Mapping[str, str],
    active_values: Mapping[str, str],
) -> list[VariableStatus]:
    """Classify each target key as added, updated or unchanged."""
    statuses: list[VariableStatus] = []
    for key, target in target_values.items():
        previous = active_values.get(key)
        if previous is None:
            status = StatusKind.ADDED
        elif previous != target.strip():
            status = StatusKind.UPDATED
        else:
            status = StatusKind.UNCHANGED
        logger.trace("%s: %s (%r -> %r)", key, status.value, previous, target)
        statuses.append(VariableStatus(key, status, previous, target))
    return statuses


def format_timestamp(now: datetime) -> str:
    """Render ``now`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + (
        f"{now.microsecond // 1000:03d}Z"
    )


def merge(
    existing_lines: Sequence[EnvLine],
    target_values: Mapping[str, str],
    managed_keys: frozenset[str],
    *,
    now: datetime | None = None,
) -> list[EnvLine]:
    """Comment out superseded managed lines and append the new values.

    Args:
        existing_lines (Sequence[EnvLine]): Parsed existing file.
        target_values (Mapping[str, str]): Target values in template key order.
        managed_keys (frozenset[str]): Keys this merge may touch.
        now (datetime | None): Timestamp for the stamp comment (defaults to now).

    Returns:
        list[EnvLine]: The merged line sequence.
    """
    stamp = format_timestamp(now or datetime.now(timezone.utc))
    merged = [
        line.commented() if line.is_active and line.key in managed_keys else line
        for line in existing_lines
    ]
    merged.append(EnvLine.empty())
    merged.append(EnvLine.comment(f"{STAMP_PREFIX} {stamp}"))
    merged.extend(EnvLine.active(key, value) for key, value in target_values.items())
    return merged


@dataclass(frozen=True)
class UpdatePlan:
    """Outcome of reconciling an env file with a template.

    Attributes:
        statuses (list[VariableStatus]): One entry per managed key, in template order.
        content (str | None): New file content, or ``None`` when nothing changed.
    """

    statuses: list[VariableStatus]
    content: str | None

    @property
    def has_changes(self) -> bool:
        return self.content is not None


def plan_update(
    existing_content: str | None,
    template: Template,
    replacement_values: Mapping[str, str | None],
    *,
    now: datetime | None = None,
) -> UpdatePlan:
    """Compute the full target state of the env file.

    Args:
        existing_content (str | None): Current file text; ``None`` if there is no file.
        template (Template): Loaded template.
        replacement_values (Mapping[str, str | None]): Values by input key.
        now (datetime | None): Timestamp for the stamp comment.

    Returns:
        UpdatePlan: Per-key statuses, and the new content when a write is needed.
    """
    existing_lines = parse_lines(existing_content) if existing_content is not None else []
    template_lines = parse_lines(template.content)

    managed_keys = compute_managed_keys(template_lines)
    targets = resolve_target_values(template_lines, template.placeholders, replacement_values)
    active = compute_active_values(existing_lines, managed_keys)
    statuses = diff_status(targets, active)

    if not any(s.changed for s in statuses):
        logger.info("All %d managed key(s) up to date", len(statuses))
        return UpdatePlan(statuses=statuses, content=None)

    merged = merge(existing_lines, targets, managed_keys, now=now)
    return UpdatePlan(statuses=statuses, content=render(merged))
