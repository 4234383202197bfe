#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for inline content parsing."""

import pytest

from mdtree.ast import (
    Code,
    Emphasis,
    HardBreak,
    Image,
    Link,
    SoftBreak,
    StrongEmphasis,
    Text,
)
from mdtree.parsers.inline import InlineParser, find_unescaped_delimiter


@pytest.fixture
def inline() -> InlineParser:
    """Provide an inline parser."""
    return InlineParser()


@pytest.mark.unit
class TestFindUnescapedDelimiter:
    """Test delimiter search with backslash escapes."""

    def test_plain_match(self) -> None:
        """Test an unescaped delimiter."""
        assert find_unescaped_delimiter("ab*c", "*", 0) == 2

    def test_escaped_match_skipped(self) -> None:
        """Test that an odd backslash run escapes the delimiter."""
        assert find_unescaped_delimiter("a\\*b*", "*", 0) == 4

    def test_even_backslashes_do_not_escape(self) -> None:
        """Test that an escaped backslash leaves the delimiter active."""
        assert find_unescaped_delimiter("a\\\\*b", "*", 0) == 3

    def test_three_backslashes_escape(self) -> None:
        """Test that three backslashes still escape."""
        assert find_unescaped_delimiter("\\\\\\*x*", "*", 0) == 5

    def test_two_character_delimiter(self) -> None:
        """Test searching for a two-character delimiter."""
        assert find_unescaped_delimiter("a*b**", "**", 0) == 3

    def test_search_starts_at_offset(self) -> None:
        """Test that matches before start are ignored."""
        assert find_unescaped_delimiter("*a*", "*", 1) == 2

    def test_backslashes_before_start_count(self) -> None:
        """Test that the backslash count looks before the start offset."""
        assert find_unescaped_delimiter("\\*", "*", 1) == -1

    def test_no_match(self) -> None:
        """Test that a missing delimiter returns -1."""
        assert find_unescaped_delimiter("abc", "_", 0) == -1


@pytest.mark.unit
class TestEmphasis:
    """Test strong and regular emphasis."""

    def test_bold_and_italic(self, inline: InlineParser) -> None:
        """Test the canonical mixed example."""
        assert inline.parse("**bold** and *italic*") == [
            StrongEmphasis([Text("bold")]),
            Text(" and "),
            Emphasis([Text("italic")]),
        ]

    def test_mixed_delimiter_pair_is_not_strong(self, inline: InlineParser) -> None:
        """Test that '*_' opens regular emphasis rather than strong emphasis."""
        assert inline.parse("*_a_*") == [Emphasis([Emphasis([Text("a")])])]

    def test_underscore_forms(self, inline: InlineParser) -> None:
        """Test __strong__ and _emphasis_."""
        assert inline.parse("__strong__") == [StrongEmphasis([Text("strong")])]
        assert inline.parse("_em_") == [Emphasis([Text("em")])]

    def test_emphasis_inside_strong(self, inline: InlineParser) -> None:
        """Test nested inline parsing of strong content."""
        assert inline.parse("**bold *and* italic**") == [
            StrongEmphasis([Text("bold "), Emphasis([Text("and")]), Text(" italic")]),
        ]

    def test_unclosed_strong_is_literal(self, inline: InlineParser) -> None:
        """Test that an unterminated marker stays text."""
        assert inline.parse("**unclosed bold") == [Text("**unclosed bold")]

    def test_unclosed_emphasis_is_literal(self, inline: InlineParser) -> None:
        """Test that a lone asterisk stays text."""
        assert inline.parse("a * b") == [Text("a * b")]

    def test_escaped_closing_delimiter_skipped(self, inline: InlineParser) -> None:
        """Test that an escaped asterisk does not close emphasis."""
        assert inline.parse("*a\\*b*") == [Emphasis([Text("a*b")])]

    def test_escaped_backslash_before_delimiter(self, inline: InlineParser) -> None:
        """Test that an even backslash run leaves the delimiter active."""
        assert inline.parse("*a\\\\*") == [Emphasis([Text("a\\")])]

    def test_empty_strong(self, inline: InlineParser) -> None:
        """Test that four asterisks form an empty strong node."""
        assert inline.parse("****") == [StrongEmphasis([])]

    def test_underscore_after_underscore_not_emphasis(self, inline: InlineParser) -> None:
        """Test the guard against re-reading a failed strong run."""
        assert inline.parse("__a_") == [Text("__a_")]

    def test_intraword_underscores(self, inline: InlineParser) -> None:
        """Test simplified matching inside words."""
        assert inline.parse("snake_case_name") == [Text("snake"), Emphasis([Text("case")]), Text("name")]

    def test_emphasis_takes_priority_over_code(self, inline: InlineParser) -> None:
        """Test that emphasis is tried before code spans."""
        assert inline.parse("*a `b* c`") == [Emphasis([Text("a `b")]), Text(" c`")]


@pytest.mark.unit
class TestCodeSpans:
    """Test inline code."""

    def test_code_span(self, inline: InlineParser) -> None:
        """Test a basic code span between text."""
        assert inline.parse("Use `code` here.") == [Text("Use "), Code("code"), Text(" here.")]

    def test_code_is_raw(self, inline: InlineParser) -> None:
        """Test that code content is not parsed."""
        assert inline.parse("`a*b* \\* &amp;`") == [Code("a*b* \\* &amp;")]

    def test_unclosed_code_is_literal(self, inline: InlineParser) -> None:
        """Test an unterminated backtick."""
        assert inline.parse("`unclosed") == [Text("`unclosed")]

    def test_empty_code_span(self, inline: InlineParser) -> None:
        """Test two adjacent backticks."""
        assert inline.parse("``") == [Code("")]


@pytest.mark.unit
class TestLinksAndImages:
    """Test links and images."""

    def test_basic_link(self, inline: InlineParser) -> None:
        """Test a link without a title."""
        assert inline.parse("[text](https://example.com)") == [
            Link(text=[Text("text")], url="https://example.com"),
        ]

    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_link_title(self, inline: InlineParser, quote: str) -> None:
        """Test double and single quoted titles."""
        assert inline.parse(f"[a](u {quote}Title{quote})") == [Link(text=[Text("a")], url="u", title="Title")]

    def test_empty_title_is_part_of_url(self, inline: InlineParser) -> None:
        """Test that a bare pair of quotes is not a title."""
        assert inline.parse('[a](u "")') == [Link(text=[Text("a")], url='u ""')]

    def test_unquoted_remainder_is_part_of_url(self, inline: InlineParser) -> None:
        """Test that text after a space without quotes stays in the URL."""
        assert inline.parse("[a](u extra)") == [Link(text=[Text("a")], url="u extra")]

    def test_destination_is_trimmed(self, inline: InlineParser) -> None:
        """Test whitespace around the destination."""
        assert inline.parse("[a](  u  )") == [Link(text=[Text("a")], url="u")]

    def test_link_ends_at_first_paren(self, inline: InlineParser) -> None:
        """Test that the destination stops at the first closing paren."""
        assert inline.parse("[a](u(1))") == [Link(text=[Text("a")], url="u(1"), Text(")")]

    def test_formatted_link_text(self, inline: InlineParser) -> None:
        """Test that link text is inline-parsed."""
        assert inline.parse("[*a*](u)") == [Link(text=[Emphasis([Text("a")])], url="u")]

    @pytest.mark.parametrize("markdown", ["[no link]", "[a] (b)", "[a](b", "[a"])
    def test_incomplete_links_are_literal(self, inline: InlineParser, markdown: str) -> None:
        """Test bracket text that is not a link."""
        assert inline.parse(markdown) == [Text(markdown)]

    def test_image(self, inline: InlineParser) -> None:
        """Test an image with a title."""
        assert inline.parse('![alt](img.png "Logo")') == [Image(alt=[Text("alt")], url="img.png", title="Logo")]

    def test_bang_without_link(self, inline: InlineParser) -> None:
        """Test exclamation marks that do not start an image."""
        assert inline.parse("Hello!") == [Text("Hello!")]
        assert inline.parse("!![a](u)") == [Text("!"), Image(alt=[Text("a")], url="u")]


@pytest.mark.unit
class TestEscapesAndBreaks:
    """Test backslash escapes and line breaks."""

    def test_escaped_asterisks(self, inline: InlineParser) -> None:
        """Test that escapes merge into one text node."""
        assert inline.parse("\\*esc\\*") == [Text("*esc*")]

    @pytest.mark.parametrize("char", list("\\`*_[]!#+-()"))
    def test_escapable_characters(self, inline: InlineParser, char: str) -> None:
        """Test every escapable character."""
        assert inline.parse("\\" + char) == [Text(char)]

    @pytest.mark.parametrize("markdown", ["\\a", "\\.", "\\&", "\\>"])
    def test_non_escapable_keeps_backslash(self, inline: InlineParser, markdown: str) -> None:
        """Test that other characters keep the backslash."""
        assert inline.parse(markdown) == [Text(markdown)]

    def test_trailing_backslash(self, inline: InlineParser) -> None:
        """Test a backslash at end of input."""
        assert inline.parse("end\\") == [Text("end\\")]

    def test_hard_break_two_spaces(self, inline: InlineParser) -> None:
        """Test two trailing spaces before a newline."""
        assert inline.parse("a  \nb") == [Text("a"), HardBreak(), Text("b")]

    def test_hard_break_backslash(self, inline: InlineParser) -> None:
        """Test a trailing backslash before a newline."""
        assert inline.parse("a\\\nb") == [Text("a"), HardBreak(), Text("b")]

    def test_soft_break(self, inline: InlineParser) -> None:
        """Test a bare newline."""
        assert inline.parse("a\nb") == [Text("a"), SoftBreak(), Text("b")]

    def test_single_space_before_newline(self, inline: InlineParser) -> None:
        """Test that one trailing space gives a soft break."""
        assert inline.parse("a \nb") == [Text("a "), SoftBreak(), Text("b")]

    def test_empty_input(self, inline: InlineParser) -> None:
        """Test that empty text yields no nodes."""
        assert inline.parse("") == []

    def test_parser_is_reusable(self, inline: InlineParser) -> None:
        """Test that repeated parses give equal results."""
        assert inline.parse("**a** [b](c)") == inline.parse("**a** [b](c)")
