# topmark:header:start
#
#   project      : EnvMark
#   file         : __init__.py
#   file_relpath : src/envmark/envfile/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotenv-style file model, parser and merger."""

from __future__ import annotations

from envmark.envfile.merger import (
    UpdatePlan,
    compute_active_values,
    compute_managed_keys,
    diff_status,
    merge,
    plan_update,
    resolve_target_values,
    substitute,
)
from envmark.envfile.model import EnvLine, LineKind, StatusKind, VariableStatus
from envmark.envfile.parser import parse_line, parse_lines, render

__all__ = [
    "EnvLine",
    "LineKind",
    "StatusKind",
    "UpdatePlan",
    "VariableStatus",
    "compute_active_values",
    "compute_managed_keys",
    "diff_status",
    "merge",
    "parse_line",
    "parse_lines",
    "plan_update",
    "render",
    "resolve_target_values",
    "substitute",
]
