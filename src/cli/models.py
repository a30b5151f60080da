"""Data models for CLI operations.

This module defines the exit codes and run summary used by the CLI.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    These exit codes provide meaningful feedback about the operation result:
    - SUCCESS (0): Every page was published
    - GENERAL_ERROR (1): Unexpected failure
    - USAGE_ERROR (2): Missing or invalid command-line arguments
    - AUTH_ERROR (3): Access token missing or rejected
    - NETWORK_ERROR (4): esa could not be reached for any page
    - INPUT_ERROR (5): Export file unreadable or malformed; nothing published
    - PUBLISH_ERROR (6): Some pages failed to publish

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
    INPUT_ERROR = 5
    PUBLISH_ERROR = 6


@dataclass
class MigrationSummary:
    """Outcome of a migration run for display to the user.

    Attributes:
        published: Titles of pages created on esa, in run order
        failed: Titles of pages that could not be published, in run order
        unreachable_count: How many of the failures were transport failures

    Example:
        >>> summary = MigrationSummary(published=["Overview"])
        >>> summary.total_count
        1
    """
    published: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    unreachable_count: int = 0

    @property
    def published_count(self) -> int:
        return len(self.published)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total_count(self) -> int:
        return self.published_count + self.failed_count
