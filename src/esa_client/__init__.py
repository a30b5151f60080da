"""esa client library for publishing migrated pages.

This package provides Python abstractions over the esa REST API v1,
covering authentication and post creation.
"""

from .errors import (
    MigrationError,
    EsaError,
    InvalidCredentialsError,
    APIUnreachableError,
    APIAccessError,
    PayloadEncodingError,
    RequestBuildError,
)

__all__ = [
    "MigrationError",
    "EsaError",
    "InvalidCredentialsError",
    "APIUnreachableError",
    "APIAccessError",
    "PayloadEncodingError",
    "RequestBuildError",
]
