# topmark:header:start
#
#   project      : EnvMark
#   file         : __init__.py
#   file_relpath : src/envmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnvMark CLI subcommands."""
