# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/envmark/cli/exit_codes.py
#   project      : EnvMark
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the EnvMark CLI.

EnvMark aligns with the BSD `sysexits` convention where practical, so that
scripts wrapping it (``npm run``-style pre-dev hooks, Makefiles) can interpret
failures consistently. The no-op case ("nothing to change") is a success.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EnvMark CLI.

    Attributes:
        SUCCESS: Successful execution, including the no-op case.
        FAILURE: Generic failure; also used when the checked port is in use.
        USAGE_ERROR: Missing or malformed command-line arguments. Mirrors BSD
            ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The template does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error writing the env file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed template or missing template field. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
