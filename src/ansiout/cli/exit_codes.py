# topmark:header:start
#
#   project      : AnsiOut
#   file         : exit_codes.py
#   file_relpath : src/ansiout/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the AnsiOut CLI.

AnsiOut aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AnsiOut CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args, unknown
            element names, out-of-range palette indices). Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Invalid configuration value in a TOML file or environment
            variable. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
