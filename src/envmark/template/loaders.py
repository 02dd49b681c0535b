# topmark:header:start
#
#   project      : EnvMark
#   file         : loaders.py
#   file_relpath : src/envmark/template/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load env-snippet templates from YAML or TOML files.

YAML (``.yaml``/``.yml``) is parsed with PyYAML's safe loader, TOML
(``.toml``) with `tomlkit`. Both are returned as plain `dict` structures and
then validated: only the presence of the fields EnvMark needs is checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
import yaml
from tomlkit.exceptions import ParseError as TomlkitParseError

from envmark.config.logging import get_logger
from envmark.template.model import (
    DEFAULT_ENV_FILE_NAME,
    Placeholder,
    Template,
    TemplateError,
    TemplateNotFoundError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from envmark.config.logging import EnvmarkLogger

logger: EnvmarkLogger = get_logger(__name__)

YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})
TOML_SUFFIXES: frozenset[str] = frozenset({".toml"})

SNIPPET_KEY = "envSnippet"


def parse_template_text(text: str, *, fmt: str) -> dict[str, Any]:
    """Parse template text into a dict.

    Args:
        text (str): Template document text.
        fmt (str): ``"yaml"`` or ``"toml"``.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        TemplateError: If the text cannot be parsed or is not a mapping.
    """
    data: Any
    if fmt == "toml":
        try:
            data = tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise TemplateError(f"Cannot parse TOML template: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise TemplateError(f"Cannot parse YAML template: {exc}") from exc
    else:
        raise TemplateError(f"Unsupported template format: {fmt!r}")

    if not isinstance(data, dict):
        raise TemplateError("The template must be a mapping")
    return data


def template_from_dict(data: dict[str, Any], *, source: Path | None = None) -> Template:
    """Validate a parsed template document and build a [`Template`][envmark.template.model.Template].

    Raises:
        TemplateError: If ``envSnippet``, its ``content`` or its ``fileName`` is missing.
    """
    snippet = data.get(SNIPPET_KEY)
    if not isinstance(snippet, dict):
        raise TemplateError(f"The {SNIPPET_KEY} property is missing", source)
    content = snippet.get("content")
    if not content or not isinstance(content, str):
        raise TemplateError(
            f"The {SNIPPET_KEY} property must have `content` hardcoded", source
        )
    file_name = snippet.get("fileName")
    if not file_name or not isinstance(file_name, str):
        raise TemplateError(
            f"The {SNIPPET_KEY} property must have `fileName` specified", source
        )

    raw_placeholders = data.get("placeholders") or {}
    if not isinstance(raw_placeholders, dict):
        raise TemplateError("The placeholders property must be a mapping", source)
    placeholders = tuple(
        Placeholder.from_config(str(token), cfg) for token, cfg in raw_placeholders.items()
    )
    inputs = data.get("inputs") or {}
    if not isinstance(inputs, dict):
        raise TemplateError("The inputs property must be a mapping", source)

    return Template(
        file_name=file_name,
        content=content,
        placeholders=placeholders,
        inputs=inputs,
        source=source,
    )


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in TOML_SUFFIXES:
        return "toml"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise TemplateError(f"Unsupported template file type {path.suffix!r}", path)


def load_template(path: Path) -> Template:
    """Read, parse and validate the template at ``path``.

    Raises:
        TemplateNotFoundError: If ``path`` does not exist.
        TemplateError: If the file cannot be read, parsed or validated.
    """
    fmt = _format_for(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TemplateNotFoundError("Template not found", path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"Cannot read template: {exc}", path) from exc

    try:
        data = parse_template_text(text, fmt=fmt)
    except TemplateError as exc:
        raise TemplateError(str(exc), path) from exc
    template = template_from_dict(data, source=path)
    logger.debug(
        "Loaded template %s: file=%s, %d placeholder(s)",
        path,
        template.file_name,
        len(template.placeholders),
    )
    return template


def env_file_name_or_default(path: Path) -> str:
    """Return the template's ``fileName``, or ``.env.local`` if it cannot be determined.

    Used by read-only consumers (the port check) which must not fail on a
    missing or incomplete template.
    """
    try:
        fmt = _format_for(path)
        data = parse_template_text(path.read_text(encoding="utf-8"), fmt=fmt)
    except (OSError, UnicodeDecodeError, TemplateError) as exc:
        logger.debug("Falling back to %s: %s", DEFAULT_ENV_FILE_NAME, exc)
        return DEFAULT_ENV_FILE_NAME
    snippet = data.get(SNIPPET_KEY)
    if isinstance(snippet, dict) and isinstance(snippet.get("fileName"), str):
        return snippet["fileName"] or DEFAULT_ENV_FILE_NAME
    return DEFAULT_ENV_FILE_NAME
