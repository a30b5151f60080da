"""Content conversion module for Scrapbox → esa Markdown conversion.

This module provides the LineTransliterator for single lines and the
PageAssembler that turns a whole Scrapbox page into an esa post body.
"""

from .scrapbox_converter import (
    DEFAULT_RULES,
    LineTransliterator,
    PageAssembler,
    RewriteRule,
    normalize_indent,
)

__all__ = [
    'DEFAULT_RULES',
    'LineTransliterator',
    'PageAssembler',
    'RewriteRule',
    'normalize_indent',
]
