"""Command-line interface for the Scrapbox to esa migration.

This package provides the `scrapbox-to-esa` CLI tool that reads a Scrapbox
export, converts each page to esa Markdown and publishes it as a new post,
reporting progress and failures on the terminal.
"""

from .migrate_command import MigrateCommand
from .models import ExitCode, MigrationSummary
from .errors import CLIError, UsageError

__all__ = [
    'MigrateCommand',
    'ExitCode',
    'MigrationSummary',
    'CLIError',
    'UsageError',
]
