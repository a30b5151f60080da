"""Typed exception hierarchy for esa-related errors.

This module defines all custom exceptions used by the esa client library.
All exceptions inherit from EsaError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class MigrationError(Exception):
    """Base exception for all scrapbox-to-esa errors.

    Use this to catch any application-level error from the migration tool.
    """
    pass


class EsaError(MigrationError):
    """Base exception for all esa-related errors."""
    pass


class InvalidCredentialsError(EsaError):
    """Raised when the access token is missing or rejected by esa."""

    def __init__(self, team: str, endpoint: str):
        super().__init__(
            f"Access token is invalid (team: {team}, endpoint: {endpoint})"
        )
        self.team = team
        self.endpoint = endpoint


class APIUnreachableError(EsaError):
    """Raised when the esa API is not available or unreachable."""

    def __init__(self, endpoint: str, reason: Optional[str] = None):
        message = f"API is not available at {endpoint}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.endpoint = endpoint
        self.reason = reason


class APIAccessError(EsaError):
    """Raised when esa answers a request with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PayloadEncodingError(EsaError):
    """Raised when a post cannot be encoded as a JSON request body."""

    def __init__(self, post_name: str, reason: str):
        super().__init__(f"Failed to encode post '{post_name}': {reason}")
        self.post_name = post_name
        self.reason = reason


class RequestBuildError(EsaError):
    """Raised when the HTTP request for a post cannot be constructed."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Failed to build request for {endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason
