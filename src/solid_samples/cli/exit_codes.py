"""
Exit Codes - Process exit statuses for the CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by ``solid-samples``."""
    
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    INVALID_ARGUMENT = 3
    UNKNOWN_SHAPE = 4
