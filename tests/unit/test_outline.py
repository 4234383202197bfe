#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the outline formatter."""

import pytest

from mdtree import parse
from mdtree.ast import CodeBlock, HtmlBlock, Image, Link, MarkdownDocument, Paragraph, Text
from mdtree.ast.outline import OutlineFormatter, format_outline
from mdtree.options import OutlineOptions


@pytest.mark.unit
class TestOutlineFormatter:
    """Test outline rendering."""

    def test_heading_with_emphasis(self) -> None:
        """Test the basic indented layout."""
        output = OutlineFormatter().format(parse("# Hello *world*"))

        assert output == "\n".join(
            [
                "MarkdownDocument",
                "  Heading(level=1)",
                "    Text 'Hello '",
                "    Emphasis",
                "      Text 'world'",
            ]
        )

    def test_lists(self) -> None:
        """Test ordered and unordered list labels."""
        unordered = format_outline(parse("- a"))
        ordered = format_outline(parse("3) b"))

        assert "  List(unordered, marker='-')" in unordered.splitlines()
        assert "  List(ordered, start=3, delimiter=')')" in ordered.splitlines()
        assert "    ListItem" in unordered.splitlines()

    def test_code_block_label(self) -> None:
        """Test that the info string appears in the label."""
        output = format_outline(CodeBlock(content="x = 1", info="python"))

        assert output == "CodeBlock(info='python') 'x = 1'"

    def test_link_and_image_labels(self) -> None:
        """Test that URL and title are shown."""
        assert format_outline(Link(text=[], url="u", title="t")) == "Link(url='u', title='t')"
        assert format_outline(Image(alt=[], url="i.png")) == "Image(url='i.png')"

    def test_custom_indent_width(self) -> None:
        """Test indent_width option."""
        output = format_outline(parse("text"), OutlineOptions(indent_width=4))

        assert output.splitlines()[1] == "    Paragraph"

    def test_hide_text(self) -> None:
        """Test show_text=False drops payloads."""
        output = format_outline(MarkdownDocument(blocks=[HtmlBlock("<div/>")]), OutlineOptions(show_text=False))

        assert output == "MarkdownDocument\n  HtmlBlock"

    def test_long_text_truncated(self) -> None:
        """Test that payloads longer than max_text_length are shortened."""
        node = Paragraph(content=[Text("abcdefghij")])
        output = format_outline(node, OutlineOptions(max_text_length=6))

        assert output.splitlines()[1] == "  Text 'abc...'"

    def test_formatter_is_reusable(self) -> None:
        """Test that formatting twice gives the same output."""
        formatter = OutlineFormatter()
        doc = parse("> quote")

        assert formatter.format(doc) == formatter.format(doc)

    def test_breaks(self) -> None:
        """Test soft and hard break labels."""
        lines = format_outline(parse("a\nb  \nc")).splitlines()

        assert "    SoftBreak" in lines
        assert "    HardBreak" in lines
