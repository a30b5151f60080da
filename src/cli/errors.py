"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError so the entry point can catch them
in one place and turn them into an exit code.
"""

from src.esa_client.errors import MigrationError


class CLIError(MigrationError):
    """Base exception for all CLI-related errors."""
    pass


class UsageError(CLIError):
    """Raised when the command line cannot be used to start a run."""

    def __init__(self, message: str):
        super().__init__(message)
