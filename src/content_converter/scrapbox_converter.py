"""Scrapbox to esa Markdown converter.

This module converts Scrapbox bracket markup into the Markdown dialect used
by esa. Conversion is line oriented: every source line maps to exactly one
output line, so page structure is preserved one-to-one.

Each line first has its indentation normalized (leading spaces become tabs)
and then goes through an ordered pipeline of regex rewrite rules. Later rules
see the output of earlier ones, so the order of DEFAULT_RULES is part of the
conversion contract.
"""

import logging
import re
from typing import Iterable, List, NamedTuple, Optional, Pattern, Sequence

from src.models.esa_post import EsaPost
from src.models.scrapbox_page import ScrapboxPage

logger = logging.getLogger(__name__)


class RewriteRule(NamedTuple):
    """A single global regex substitution applied to a line."""
    name: str
    pattern: Pattern[str]
    replacement: str

    def apply(self, line: str) -> str:
        return self.pattern.sub(self.replacement, line)


def _rule(name: str, pattern: str, replacement: str) -> RewriteRule:
    return RewriteRule(name, re.compile(pattern), replacement)


DEFAULT_RULES = (
    # esa numbers posts by creation order, so in-site links can't be resolved
    # here; keep the text emphasized and point at a placeholder to fix by hand.
    _rule('in_site_link', r'\[#([^\]]+)\]', r'[***\1***](/#)'),
    _rule('strong', r'\[\* ([^\]]+)\]', r'**\1**'),
    _rule('heading', r'\[\*\*+ (.+)\]', r'## \1'),
    _rule('list_item', r'^(\t*)\t(.*)\Z', r'\1* \2'),
    _rule('link_text_first', r'\[(.+) (http[^ ]+)\]', r'[\1](\2)'),
    _rule('link_url_first', r'\[(http[^ ]+) (.*)\]', r'[\2](\1)'),
    # [png|jpeg|jpg] is a character class, not an extension list: any URL
    # whose last character is one of p n g | j e counts as an image.
    _rule('image', r'\[((https://gyazo\.com.+)|(http.*[png|jpeg|jpg]))\]', r'![image](\1)'),
    _rule('strikethrough', r'\[- ([^\]]+)\]', r'~~\1~~'),
)


def normalize_indent(line: str) -> str:
    """Replace the leading run of spaces with the same number of tabs.

    A space run that runs straight into a digit is treated as a numbered
    list line and loses its indentation entirely.

    Args:
        line: Raw Scrapbox line

    Returns:
        The line with its leading spaces rewritten as tabs

    Example:
        >>> normalize_indent("  item")
        '\\t\\titem'
        >>> normalize_indent("  3rd item")
        '3rd item'
    """
    depth = 0
    for char in line:
        if char == ' ':
            depth += 1
        elif '0' <= char <= '9':
            depth = 0
            break
        else:
            break
    return '\t' * depth + line.lstrip(' ')


class LineTransliterator:
    """Converts single Scrapbox lines to esa Markdown lines.

    The transliterator is stateless apart from its rule list, so one instance
    can be shared across all pages of a run.

    Example:
        >>> transliterator = LineTransliterator()
        >>> transliterator.transliterate("[* important]")
        '**important**'
    """

    def __init__(self, rules: Optional[Sequence[RewriteRule]] = None):
        """Initialize with an ordered rule list.

        Args:
            rules: Rewrite rules applied in order after indentation
                   normalization (defaults to DEFAULT_RULES)
        """
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def transliterate(self, line: str) -> str:
        """Convert one Scrapbox line.

        Never fails: text that matches no rule passes through with only its
        indentation normalized.

        Args:
            line: Raw Scrapbox line (may be empty)

        Returns:
            The converted line, without a trailing newline
        """
        converted = normalize_indent(line)
        for rule in self.rules:
            converted = rule.apply(converted)
        return converted


class PageAssembler:
    """Builds esa post bodies out of Scrapbox pages.

    Scrapbox repeats the page title as the first line of every page, so that
    line becomes the level-1 heading of the body.
    """

    def __init__(self, transliterator: Optional[LineTransliterator] = None):
        self.transliterator = transliterator or LineTransliterator()

    def assemble(self, lines: Iterable[str]) -> str:
        """Convert page lines into a newline-terminated Markdown body.

        Args:
            lines: Raw Scrapbox lines in page order

        Returns:
            Markdown body with one output line per input line; empty input
            gives an empty body
        """
        body: List[str] = []
        for index, line in enumerate(lines):
            converted = self.transliterator.transliterate(line)
            if index == 0:
                converted = '# ' + converted
            body.append(converted + '\n')
        return ''.join(body)

    def build_post(self, page: ScrapboxPage) -> EsaPost:
        """Create the esa post for a Scrapbox page.

        Args:
            page: Page decoded from the export

        Returns:
            EsaPost named after the page with the converted body
        """
        body_md = self.assemble(page.lines)
        logger.debug(f"Converted '{page.title}': {len(page.lines)} line(s)")
        return EsaPost(name=page.title, body_md=body_md)
