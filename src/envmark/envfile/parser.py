# topmark:header:start
#
#   project      : EnvMark
#   file         : parser.py
#   file_relpath : src/envmark/envfile/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse and render dotenv-style text.

Parsing is lenient: it never fails. Lines that are neither blank, comments nor
``KEY=value`` assignments become OPAQUE lines and are rendered back verbatim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from envmark.config.logging import get_logger
from envmark.envfile.model import EnvLine, LineKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from envmark.config.logging import EnvmarkLogger

logger: EnvmarkLogger = get_logger(__name__)


def parse_line(line: str) -> EnvLine:
    """Classify a single line of text.

    The key and value are taken from the *trimmed* line, split on the first
    ``=``; the value may contain further ``=`` characters.

    Args:
        line (str): One line, without its ``\\n`` terminator.

    Returns:
        EnvLine: The classified line, holding ``line`` as its raw text.
    """
    trimmed = line.strip()
    if not trimmed:
        return EnvLine(LineKind.EMPTY, line)
    if trimmed.startswith("#"):
        return EnvLine(LineKind.COMMENT, line)

    key, sep, value = trimmed.partition("=")
    key = key.strip()
    if not sep or not key:
        logger.debug("Keeping malformed line verbatim: %r", line)
        return EnvLine(LineKind.OPAQUE, line)
    return EnvLine(LineKind.ACTIVE, line, key=key, value=value)


def parse_lines(content: str) -> list[EnvLine]:
    """Split ``content`` on newlines and classify each line.

    Empty trailing segments are kept: ``"A=1\\n"`` yields an ACTIVE line followed
    by an EMPTY one.

    Args:
        content (str): Full file or template text.

    Returns:
        list[EnvLine]: One record per line, in order.
    """
    lines = [parse_line(line) for line in content.split("\n")]
    logger.trace("Parsed %d line(s)", len(lines))
    return lines


def render(lines: Iterable[EnvLine]) -> str:
    """Join line texts with ``\\n`` and append a single trailing newline."""
    return "\n".join(line.text for line in lines) + "\n"
