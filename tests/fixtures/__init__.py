"""Test fixtures for scrapbox-to-esa tests."""

from .sample_exports import (
    SAMPLE_PAGE_OVERVIEW,
    SAMPLE_PAGE_EMPTY,
    SAMPLE_PAGE_NOTES,
    SAMPLE_EXPORT,
    EXPECTED_OVERVIEW_BODY,
    write_export,
    make_export,
)

__all__ = [
    "SAMPLE_PAGE_OVERVIEW",
    "SAMPLE_PAGE_EMPTY",
    "SAMPLE_PAGE_NOTES",
    "SAMPLE_EXPORT",
    "EXPECTED_OVERVIEW_BODY",
    "write_export",
    "make_export",
]
