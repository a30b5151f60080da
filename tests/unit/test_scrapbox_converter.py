"""Unit tests for content_converter.scrapbox_converter module."""

import re

import pytest

from src.content_converter.scrapbox_converter import (
    DEFAULT_RULES,
    LineTransliterator,
    PageAssembler,
    RewriteRule,
    normalize_indent,
)
from src.models.esa_post import BOT_USER, SCRAPBOX_CATEGORY, EsaPost
from src.models.scrapbox_page import ScrapboxPage
from tests.fixtures.sample_exports import EXPECTED_OVERVIEW_BODY, SAMPLE_PAGE_OVERVIEW


class TestNormalizeIndent:
    """Test cases for normalize_indent function."""

    def test_spaces_before_text_become_tabs(self):
        """Leading spaces followed by a letter become the same number of tabs."""
        assert normalize_indent("  item") == "\t\titem"

    def test_spaces_before_digit_are_dropped(self):
        """A space run ending in a digit resets the depth to zero (numbered list quirk)."""
        assert normalize_indent("  3rd item") == "3rd item"

    def test_single_space_before_digit_is_dropped(self):
        """The digit reset applies to any run length."""
        assert normalize_indent(" 1. first") == "1. first"

    def test_line_starting_with_digit_unchanged(self):
        """A digit with no leading spaces leaves the line alone."""
        assert normalize_indent("2024 plans") == "2024 plans"

    def test_no_indentation_unchanged(self):
        """Lines without leading spaces pass through."""
        assert normalize_indent("plain text") == "plain text"

    def test_empty_line(self):
        """Empty lines stay empty."""
        assert normalize_indent("") == ""

    def test_only_spaces(self):
        """A line made only of spaces becomes only tabs."""
        assert normalize_indent("   ") == "\t\t\t"

    def test_inner_spaces_are_kept(self):
        """Only the leading run is rewritten."""
        assert normalize_indent(" a  b ") == "\ta  b "

    def test_existing_tab_stops_the_run(self):
        """A tab is a non-space character and ends the count."""
        assert normalize_indent(" \titem") == "\t\titem"

    def test_digit_after_text_does_not_reset(self):
        """Only a digit directly after the space run resets the depth."""
        assert normalize_indent("  v2 notes") == "\t\tv2 notes"


class TestRewriteRule:
    """Test cases for RewriteRule descriptors."""

    def test_apply_replaces_all_matches(self):
        """A rule substitutes every non-overlapping match in the line."""
        rule = RewriteRule("x", re.compile(r"a"), "b")
        assert rule.apply("banana") == "bbnbnb"

    def test_default_rule_order(self):
        """Default rules run in the fixed conversion order."""
        assert [rule.name for rule in DEFAULT_RULES] == [
            "in_site_link",
            "strong",
            "heading",
            "list_item",
            "link_text_first",
            "link_url_first",
            "image",
            "strikethrough",
        ]


class TestLineTransliterator:
    """Test cases for LineTransliterator.transliterate."""

    @pytest.fixture
    def transliterator(self):
        return LineTransliterator()

    @pytest.mark.parametrize("line, expected", [
        ("[#Other Page]", "[***Other Page***](/#)"),
        ("[* important]", "**important**"),
        ("[** Section]", "## Section"),
        ("[*** Deep Section]", "## Deep Section"),
        ("\t\titem", "\t* item"),
        ("\titem", "* item"),
        ("[label http://x.test/a]", "[label](http://x.test/a)"),
        ("[http://x.test/a label]", "[label](http://x.test/a)"),
        ("[https://gyazo.com/abc123]", "![image](https://gyazo.com/abc123)"),
        ("[http://x.test/pic.png]", "![image](http://x.test/pic.png)"),
        ("[http://x.test/pic.jpg]", "![image](http://x.test/pic.jpg)"),
        ("[- removed]", "~~removed~~"),
    ])
    def test_rewrites(self, transliterator, line, expected):
        """Each markup construct is rewritten to its esa form."""
        assert transliterator.transliterate(line) == expected

    def test_plain_text_unchanged(self, transliterator):
        """Lines with no markup pass through unchanged."""
        assert transliterator.transliterate("just some text") == "just some text"

    def test_empty_line(self, transliterator):
        """Empty lines convert to empty lines."""
        assert transliterator.transliterate("") == ""

    def test_is_deterministic(self, transliterator):
        """Converting the same line twice yields the same output."""
        line = "  see [* this] and [- that] at [site https://example.com]"
        assert transliterator.transliterate(line) == transliterator.transliterate(line)

    def test_indented_line_becomes_list_item(self, transliterator):
        """One space of indentation becomes a top-level bullet."""
        assert transliterator.transliterate(" item") == "* item"

    def test_nested_indentation_keeps_outer_tabs(self, transliterator):
        """Deeper indentation keeps all but the last tab before the bullet."""
        assert transliterator.transliterate("   item") == "\t\t* item"

    def test_trailing_newline_does_not_create_list_item(self, transliterator):
        """Only a line that is entirely indentation plus text becomes a bullet."""
        assert transliterator.transliterate("\t\titem\n") == "\t\titem\n"

    def test_numbered_line_is_not_a_list_item(self, transliterator):
        """The digit reset removes indentation so no bullet is produced."""
        assert transliterator.transliterate("  3rd item") == "3rd item"

    def test_rewrites_apply_to_every_match(self, transliterator):
        """Inline rules rewrite every occurrence on the line."""
        assert (
            transliterator.transliterate("[* a] and [* b]")
            == "**a** and **b**"
        )
        assert (
            transliterator.transliterate("[- a] [- b]")
            == "~~a~~ ~~b~~"
        )

    def test_multiple_in_site_links(self, transliterator):
        """Every in-site reference on a line points at the placeholder."""
        assert (
            transliterator.transliterate("[#One] [#Two]")
            == "[***One***](/#) [***Two***](/#)"
        )

    def test_strong_inside_list_item(self, transliterator):
        """Inline rules and list rewriting combine on one line."""
        assert transliterator.transliterate(" [* key] point") == "* **key** point"

    def test_unclosed_bracket_passes_through(self, transliterator):
        """Malformed bracket expressions are left untouched."""
        assert transliterator.transliterate("[* never closed") == "[* never closed"

    def test_loose_image_match_on_trailing_letter(self, transliterator):
        """Any URL ending in p, n, g, j, e or | counts as an image (documented quirk)."""
        assert (
            transliterator.transliterate("[http://x.test/recipe]")
            == "![image](http://x.test/recipe)"
        )

    def test_url_without_image_letter_is_not_an_image(self, transliterator):
        """A bare URL ending in another character is left as is."""
        assert transliterator.transliterate("[http://x.test/doc]") == "[http://x.test/doc]"

    def test_custom_rules(self):
        """A transliterator can run an explicit rule list."""
        rules = [RewriteRule("shout", re.compile(r"!"), "!!")]
        transliterator = LineTransliterator(rules=rules)

        assert transliterator.transliterate(" hi!") == "\thi!!"

    def test_empty_rule_list_only_normalizes_indent(self):
        """With no rules only the indentation step runs."""
        transliterator = LineTransliterator(rules=[])

        assert transliterator.transliterate("  [* x]") == "\t\t[* x]"


class TestPageAssembler:
    """Test cases for PageAssembler."""

    @pytest.fixture
    def assembler(self):
        return PageAssembler()

    def test_first_line_becomes_title_heading(self, assembler):
        """The first line is prefixed with a level-1 heading marker."""
        body = assembler.assemble(["Overview", "text"])

        assert body.splitlines()[0] == "# Overview"

    def test_every_line_is_newline_terminated(self, assembler):
        """K input lines give exactly K newline-terminated output lines."""
        lines = ["Title", "a", "", " b", "  3rd"]
        body = assembler.assemble(lines)

        assert body.endswith("\n")
        assert body.count("\n") == len(lines)
        assert len(body.splitlines()) == len(lines)

    def test_line_order_is_preserved(self, assembler):
        """Output lines appear in input order."""
        body = assembler.assemble(["T", "first", "second", "third"])

        assert body == "# T\nfirst\nsecond\nthird\n"

    def test_empty_page_gives_empty_body(self, assembler):
        """An empty line sequence yields an empty body."""
        assert assembler.assemble([]) == ""

    def test_single_line_page(self, assembler):
        """A page with only its title line becomes one heading line."""
        assert assembler.assemble(["Only"]) == "# Only\n"

    def test_first_line_is_converted_before_prefix(self, assembler):
        """Markup on the title line is converted, then the heading marker added."""
        assert assembler.assemble(["[* Bold title]"]) == "# **Bold title**\n"

    def test_full_page_conversion(self, assembler):
        """A page mixing every construct converts line by line."""
        body = assembler.assemble(SAMPLE_PAGE_OVERVIEW["lines"])

        assert body == EXPECTED_OVERVIEW_BODY

    def test_accepts_any_iterable(self, assembler):
        """Lines may come from a generator."""
        body = assembler.assemble(line for line in ["T", "x"])

        assert body == "# T\nx\n"

    def test_uses_given_transliterator(self):
        """The assembler delegates line conversion to its transliterator."""
        transliterator = LineTransliterator(rules=[])
        assembler = PageAssembler(transliterator)

        assert assembler.assemble(["T", "[* x]"]) == "# T\n[* x]\n"


class TestBuildPost:
    """Test cases for PageAssembler.build_post."""

    def test_builds_post_from_page(self):
        """The post carries the title, converted body and fixed metadata."""
        page = ScrapboxPage(
            title="Overview",
            created=1,
            updated=2,
            lines=["Overview", "[* hi]"],
        )

        post = PageAssembler().build_post(page)

        assert isinstance(post, EsaPost)
        assert post.name == "Overview"
        assert post.body_md == "# Overview\n**hi**\n"
        assert post.category == SCRAPBOX_CATEGORY
        assert post.wip is False
        assert post.user == BOT_USER

    def test_empty_page(self):
        """A page without lines produces an empty body."""
        post = PageAssembler().build_post(ScrapboxPage(title="Empty"))

        assert post.body_md == ""
