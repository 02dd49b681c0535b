# topmark:header:start
#
#   project      : EnvMark
#   file         : test_file_and_settings.py
#   file_relpath : tests/unit/test_file_and_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for settings resolution and env-file I/O helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from envmark.config.settings import DEFAULT_TEMPLATE_RELPATH, Settings
from envmark.utils.file import read_text_or_none, replace_file


def test_settings_default_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without options the root is the working directory."""
    monkeypatch.chdir(tmp_path)

    settings = Settings.resolve(root=None, template=None)

    assert settings.root == tmp_path
    assert settings.template_path == tmp_path / DEFAULT_TEMPLATE_RELPATH
    assert settings.env_path(".env.local") == tmp_path / ".env.local"


def test_settings_relative_template_is_under_root(tmp_path: Path) -> None:
    """A relative template path is resolved against the root."""
    settings = Settings.resolve(root=tmp_path, template="conf/t.toml")

    assert settings.template_path == tmp_path / "conf" / "t.toml"


def test_settings_absolute_template_is_kept(tmp_path: Path) -> None:
    """An absolute template path is used as given."""
    template = tmp_path / "elsewhere" / "t.yaml"

    settings = Settings.resolve(root=tmp_path / "root", template=str(template))

    assert settings.template_path == template


def test_read_text_or_none_missing(tmp_path: Path) -> None:
    """A missing file reads as None."""
    assert read_text_or_none(tmp_path / "absent") is None


def test_non_utf8_bytes_round_trip(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 are read and written back unchanged."""
    path = tmp_path / ".env"
    path.write_bytes(b"A=caf\xe9\n\xff\xfe\n")

    text = read_text_or_none(path)
    assert text is not None
    replace_file(path, text + "B=2\n")

    assert path.read_bytes() == b"A=caf\xe9\n\xff\xfe\nB=2\n"


def test_read_text_or_none_propagates_other_errors(tmp_path: Path) -> None:
    """Only a missing file reads as None."""
    with pytest.raises(IsADirectoryError):
        read_text_or_none(tmp_path)


def test_replace_file_writes_exact_bytes(tmp_path: Path) -> None:
    """Content is written as UTF-8 without newline translation."""
    path = tmp_path / ".env.local"

    written = replace_file(path, "A=é\r\nB=2\n")

    assert path.read_bytes() == "A=é\r\nB=2\n".encode()
    assert written == len("A=é\r\nB=2\n".encode())


def test_replace_file_keeps_mode_and_leaves_no_temp(tmp_path: Path) -> None:
    """Replacing keeps permission bits and cleans up its temporary file."""
    path = tmp_path / ".env.local"
    path.write_text("old\n", encoding="utf-8")
    os.chmod(path, 0o600)

    replace_file(path, "new\n")

    assert path.read_text(encoding="utf-8") == "new\n"
    assert (path.stat().st_mode & 0o777) == 0o600
    assert sorted(p.name for p in tmp_path.iterdir()) == [".env.local"]


def test_replace_file_failure_leaves_no_temp(tmp_path: Path) -> None:
    """On failure the temporary file is removed and the error propagates."""
    target = tmp_path / ".env.local"
    target.mkdir()

    with pytest.raises(OSError):
        replace_file(target, "A=1\n")

    assert sorted(p.name for p in tmp_path.iterdir()) == [".env.local"]
