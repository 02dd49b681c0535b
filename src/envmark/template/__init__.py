# topmark:header:start
#
#   project      : EnvMark
#   file         : __init__.py
#   file_relpath : src/envmark/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Env-snippet templates: model and loaders."""

from __future__ import annotations

from envmark.template.loaders import (
    env_file_name_or_default,
    load_template,
    parse_template_text,
    template_from_dict,
)
from envmark.template.model import (
    DEFAULT_ENV_FILE_NAME,
    DEFAULT_PORT,
    INPUT_CLIENT_ID,
    INPUT_DOMAIN,
    INPUT_PORT,
    Placeholder,
    Template,
    TemplateError,
    TemplateNotFoundError,
)

__all__ = [
    "DEFAULT_ENV_FILE_NAME",
    "DEFAULT_PORT",
    "INPUT_CLIENT_ID",
    "INPUT_DOMAIN",
    "INPUT_PORT",
    "Placeholder",
    "Template",
    "TemplateError",
    "TemplateNotFoundError",
    "env_file_name_or_default",
    "load_template",
    "parse_template_text",
    "template_from_dict",
]
