"""Documented exit codes for the gnsstrack CLI.

Exit codes follow UNIX conventions:
- 0: Success
- 1: General/unspecified error
- 2: Invalid command-line arguments or usage
- 3-4: Application-specific errors

Usage:
    from gnsstrack.util.exit_codes import ExitCode
    sys.exit(ExitCode.MALFORMED_LOG)
"""

from __future__ import annotations


class ExitCode:
    """Exit code constants for gnsstrack processes.

    Attributes:
        SUCCESS: Normal termination, no errors.
        GENERAL_ERROR: Unspecified runtime error.
        INVALID_ARGS: Command-line argument validation failed.
        MALFORMED_LOG: A log entry was missing required fields for its type.
        SOURCE_NOT_FOUND: The requested log file does not exist.
    """

    SUCCESS: int = 0
    GENERAL_ERROR: int = 1
    INVALID_ARGS: int = 2
    MALFORMED_LOG: int = 3
    SOURCE_NOT_FOUND: int = 4

    @classmethod
    def message(cls, code: int) -> str:
        """Return a human-readable message for an exit code."""
        messages = {
            cls.SUCCESS: "Success",
            cls.GENERAL_ERROR: "General error",
            cls.INVALID_ARGS: "Invalid arguments",
            cls.MALFORMED_LOG: "Malformed log entry",
            cls.SOURCE_NOT_FOUND: "Log source not found",
        }
        return messages.get(code, f"Unknown exit code {code}")
