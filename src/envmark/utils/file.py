# topmark:header:start
#
#   project      : EnvMark
#   file         : file.py
#   file_relpath : src/envmark/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for reading and rewriting env files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from envmark.config.logging import get_logger

logger = get_logger(__name__)


def read_text_or_none(path: Path) -> str | None:
    """Return the text of ``path``, or ``None`` if the file does not exist.

    Bytes that are not valid UTF-8 are kept as surrogate escapes so that
    [`replace_file`][envmark.utils.file.replace_file] writes them back unchanged.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        logger.debug("No existing file at %s", path)
        return None


def replace_file(path: Path, text: str) -> int:
    """Replace the whole content of ``path`` with ``text``.

    The text is written to a sibling temporary file which then replaces the
    target, so readers never see a half-written file.

    Args:
        path (Path): Destination file.
        text (str): New content (written as UTF-8, newlines untranslated; surrogate
            escapes from [`read_text_or_none`][envmark.utils.file.read_text_or_none]
            are written back as the original bytes).

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: If the file cannot be written.
    """
    data = text.encode("utf-8", errors="surrogateescape")
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o777)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
