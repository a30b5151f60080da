"""Scrapbox export data models."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ScrapboxPage:
    """One page of a Scrapbox project export.

    Attributes:
        title: Page title
        created: Creation time (epoch seconds)
        updated: Last update time (epoch seconds)
        lines: Raw text lines in Scrapbox markup, in page order
    """
    title: str
    created: int = 0
    updated: int = 0
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScrapboxExport:
    """Decoded Scrapbox project export.

    Attributes:
        name: Project name (URL slug)
        display_name: Human-readable project name
        exported: Export time (epoch seconds)
        pages: Pages in export order
    """
    name: str = ""
    display_name: str = ""
    exported: int = 0
    pages: List[ScrapboxPage] = field(default_factory=list)
