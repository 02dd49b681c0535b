# topmark:header:start
#
#   project      : EnvMark
#   file         : test_merger.py
#   file_relpath : tests/envfile/test_merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the env-file merge steps and the `plan_update` driver."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from envmark.envfile.merger import (
    STAMP_PREFIX,
    compute_active_values,
    compute_managed_keys,
    diff_status,
    format_timestamp,
    merge,
    plan_update,
    resolve_target_values,
    substitute,
)
from envmark.envfile.model import LineKind, StatusKind
from envmark.envfile.parser import parse_lines
from envmark.template.model import Placeholder, Template

NOW = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)

SNIPPET = "VITE_AUTH0_DOMAIN={{DOMAIN}}\nVITE_AUTH0_CLIENT_ID={{CLIENT_ID}}\nPORT={{PORT}}\n"

PLACEHOLDERS = (
    Placeholder("{{DOMAIN}}", "auth0Domain"),
    Placeholder("{{CLIENT_ID}}", "auth0ClientId"),
    Placeholder("{{PORT}}", "port"),
)

TEMPLATE = Template(file_name=".env.local", content=SNIPPET, placeholders=PLACEHOLDERS)

VALUES = {"auth0Domain": "d.auth0.com", "auth0ClientId": "cid", "port": "3000"}


def test_managed_keys_come_from_active_template_lines() -> None:
    """Comments and blanks in the template do not define managed keys."""
    lines = parse_lines("# header\nA={{X}}\n\n# B=ignored\nC=literal\n")

    assert compute_managed_keys(lines) == frozenset({"A", "C"})


def test_substitute_is_global_and_literal() -> None:
    """Every occurrence is replaced; tokens are not regular expressions."""
    assert substitute(" {{X}}-{{X}} ", [("{{X}}", "a")]) == "a-a"
    assert substitute("a.b", [(".", "-")]) == "a-b"
    assert substitute("$(X)", [("$(X)", "ok")]) == "ok"


def test_substitute_applies_pairs_in_order() -> None:
    """Later tokens see the output of earlier replacements."""
    assert substitute("{{A}}", [("{{A}}", "{{B}}"), ("{{B}}", "b")]) == "b"
    assert substitute("{{B}}", [("{{A}}", "x"), ("{{B}}", "{{A}}")]) == "{{A}}"


def test_resolve_target_values_in_template_order() -> None:
    """Targets keep template key order; missing replacements become empty."""
    targets = resolve_target_values(
        parse_lines(SNIPPET), PLACEHOLDERS, {"auth0Domain": "d", "port": None}
    )

    assert list(targets) == ["VITE_AUTH0_DOMAIN", "VITE_AUTH0_CLIENT_ID", "PORT"]
    assert targets == {"VITE_AUTH0_DOMAIN": "d", "VITE_AUTH0_CLIENT_ID": "", "PORT": ""}


def test_placeholder_without_input_key_resolves_to_empty() -> None:
    """A placeholder with no usable mapping is replaced by nothing."""
    placeholder = Placeholder.from_config("{{X}}", {"description": "no inputKey"})

    targets = resolve_target_values(parse_lines("A=pre{{X}}post"), [placeholder], VALUES)

    assert targets == {"A": "prepost"}


def test_active_values_last_definition_wins() -> None:
    """Later definitions shadow earlier ones; commented values do not count."""
    existing = parse_lines("PORT=1\nOTHER=x\nPORT= 2 \n# PORT=3\n")

    assert compute_active_values(existing, frozenset({"PORT"})) == {"PORT": "2"}


def test_diff_status_classification() -> None:
    """Absent → added, different → updated, equal after trimming → unchanged."""
    statuses = diff_status(
        {"A": "1", "B": "2", "C": "3", "D": ""},
        {"B": "other", "C": "3", "D": ""},
    )

    assert [(s.key, s.status) for s in statuses] == [
        ("A", StatusKind.ADDED),
        ("B", StatusKind.UPDATED),
        ("C", StatusKind.UNCHANGED),
        ("D", StatusKind.UNCHANGED),
    ]
    assert statuses[1].previous == "other"
    assert statuses[0].previous is None


def test_merge_comments_managed_lines_and_appends_block() -> None:
    """Managed active lines are commented verbatim, then the new block follows."""
    existing = parse_lines("# keep\nPORT=4000\nOTHER=x")

    merged = merge(existing, {"PORT": "5000"}, frozenset({"PORT"}), now=NOW)

    assert [ln.text for ln in merged] == [
        "# keep",
        "# PORT=4000",
        "OTHER=x",
        "",
        f"{STAMP_PREFIX} 2025-01-02T03:04:05.678Z",
        "PORT=5000",
    ]
    assert merged[-1].kind == LineKind.ACTIVE


def test_format_timestamp_converts_to_utc() -> None:
    """Aware datetimes in other zones are rendered in UTC."""
    local = datetime(2025, 1, 2, 5, 4, 5, 1500, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(local) == "2025-01-02T03:04:05.001Z"


def test_plan_update_on_missing_file() -> None:
    """No file: every key is added and the content holds the whole block."""
    plan = plan_update(None, TEMPLATE, VALUES, now=NOW)

    assert plan.has_changes
    assert {s.status for s in plan.statuses} == {StatusKind.ADDED}
    assert plan.content == (
        "\n"
        f"{STAMP_PREFIX} 2025-01-02T03:04:05.678Z\n"
        "VITE_AUTH0_DOMAIN=d.auth0.com\n"
        "VITE_AUTH0_CLIENT_ID=cid\n"
        "PORT=3000\n"
    )


def test_plan_update_no_changes_returns_no_content() -> None:
    """When everything is up to date there is nothing to write."""
    existing = "VITE_AUTH0_DOMAIN=d.auth0.com\nVITE_AUTH0_CLIENT_ID= cid \nPORT=3000\n"

    plan = plan_update(existing, TEMPLATE, VALUES, now=NOW)

    assert not plan.has_changes
    assert plan.content is None
    assert all(s.status == StatusKind.UNCHANGED for s in plan.statuses)


def test_plan_update_is_idempotent_from_second_run() -> None:
    """Applying the plan and planning again yields no change."""
    first = plan_update("A=1\nPORT=4000\n", TEMPLATE, VALUES, now=NOW)
    assert first.content is not None

    second = plan_update(first.content, TEMPLATE, VALUES, now=NOW)

    assert not second.has_changes


@pytest.mark.parametrize("previous", ["", "stale"])
def test_plan_update_single_key(previous: str) -> None:
    """A single managed key is updated only when its value differs."""
    template = Template(
        file_name=".env",
        content="PORT={{P}}",
        placeholders=(Placeholder("{{P}}", "port"),),
    )

    changed = plan_update(f"PORT={previous}\n", template, {"port": "3000"}, now=NOW)
    unchanged = plan_update("PORT=3000\n", template, {"port": "3000"}, now=NOW)

    assert changed.statuses[0].status == StatusKind.UPDATED
    assert changed.content is not None and f"# PORT={previous}\n" in changed.content
    assert unchanged.content is None


def test_plan_update_preserves_unmanaged_lines_in_order() -> None:
    """Every non-managed line survives byte-for-byte and in the same order."""
    existing = "# top\nA=1\n\nweird line\nPORT=1\n  B = 2  \n"

    plan = plan_update(existing, TEMPLATE, VALUES, now=NOW)

    assert plan.content is not None
    out_lines = plan.content.split("\n")
    kept = ["# top", "A=1", "", "weird line", "  B = 2  "]
    positions = [out_lines.index(line) for line in kept]
    assert positions == sorted(positions)
    assert "# PORT=1" in out_lines
