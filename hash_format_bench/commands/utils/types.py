"""
:Description: Provides types and constants shared by CLI commands.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

# Settings shared by all `click` commands. Unknown options are passed through as positional values so that the
# sample size check can report a negative number (like `-5`) as a user error instead of an unrecognized flag.
CONTEXT_SETTINGS: Final = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}


class ExitCode(IntEnum):
    """
    Error codes returned by the `hash-format-bench` command.
    """

    SUCCESS = 0
    # Bad sample size or too many arguments. Nothing is generated or measured.
    INVALID_ARGUMENT = 1
