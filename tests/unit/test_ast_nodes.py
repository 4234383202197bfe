#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for document tree node classes."""

import dataclasses

import pytest

from mdtree.ast import (
    BlockElement,
    Blockquote,
    Code,
    CodeBlock,
    Emphasis,
    HardBreak,
    Heading,
    HorizontalRule,
    HtmlBlock,
    HtmlInline,
    Image,
    InlineElement,
    Link,
    List,
    ListItem,
    MarkdownDocument,
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
    UnorderedListType,
    get_node_children,
)


@pytest.mark.unit
class TestNodeConstruction:
    """Test node construction and invariants."""

    def test_sequences_are_stored_as_tuples(self) -> None:
        """Test that list arguments are frozen into tuples."""
        para = Paragraph(content=[Text("a"), Text("b")])

        assert isinstance(para.content, tuple)
        assert para.content == (Text("a"), Text("b"))

    def test_nodes_are_frozen(self) -> None:
        """Test that node fields cannot be reassigned."""
        heading = Heading(level=1, content=[Text("Title")])

        with pytest.raises(dataclasses.FrozenInstanceError):
            heading.level = 2  # type: ignore[misc]

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_valid_heading_levels(self, level: int) -> None:
        """Test that levels 1 through 6 are accepted."""
        assert Heading(level=level).level == level

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_invalid_heading_levels(self, level: int) -> None:
        """Test that levels outside 1..6 are rejected."""
        with pytest.raises(ValueError, match="level"):
            Heading(level=level)

    def test_empty_list_rejected(self) -> None:
        """Test that a List needs at least one item."""
        with pytest.raises(ValueError, match="at least one item"):
            List(items=[], list_type=UnorderedListType("-"))

    def test_invalid_unordered_marker(self) -> None:
        """Test that only -, * and + are unordered markers."""
        with pytest.raises(ValueError):
            UnorderedListType("#")

    def test_invalid_ordered_delimiter(self) -> None:
        """Test that only . and ) are ordered delimiters."""
        with pytest.raises(ValueError):
            OrderedListType(start_number=1, delimiter=":")

    def test_ordered_list_type_defaults(self) -> None:
        """Test OrderedListType defaults."""
        list_type = OrderedListType()

        assert list_type.start_number == 1
        assert list_type.delimiter == "."

    def test_list_ordered_property(self) -> None:
        """Test the List.ordered convenience property."""
        item = ListItem(content=[Paragraph(content=[Text("x")])])

        assert List(items=[item], list_type=OrderedListType()).ordered is True
        assert List(items=[item], list_type=UnorderedListType("*")).ordered is False

    def test_list_item_defaults_to_tight(self) -> None:
        """Test that ListItem is tight unless told otherwise."""
        assert ListItem().tight is True

    def test_code_block_info_defaults_to_none(self) -> None:
        """Test that CodeBlock.info is optional."""
        assert CodeBlock(content="x").info is None

    def test_document_metadata_defaults_to_empty(self) -> None:
        """Test that MarkdownDocument.metadata is an empty dict by default."""
        doc = MarkdownDocument()

        assert doc.blocks == ()
        assert doc.metadata == {}

    def test_document_metadata_is_not_shared(self) -> None:
        """Test that each document gets its own metadata dict."""
        assert MarkdownDocument().metadata is not MarkdownDocument().metadata

    def test_document_metadata_is_read_only(self) -> None:
        """Test that metadata cannot be changed after construction."""
        doc = MarkdownDocument()

        with pytest.raises(TypeError):
            doc.metadata["title"] = "Changed"  # type: ignore[index]

        assert doc.metadata == {}

    def test_document_metadata_is_copied(self) -> None:
        """Test that later changes to the source mapping do not leak into the document."""
        source = {"title": "Notes"}
        doc = MarkdownDocument(metadata=source)
        source["title"] = "Changed"

        assert doc.metadata == {"title": "Notes"}
        assert doc == MarkdownDocument(metadata={"title": "Notes"})


@pytest.mark.unit
class TestNodeEquality:
    """Test structural equality of nodes."""

    def test_equal_trees_compare_equal(self) -> None:
        """Test that structurally identical trees are equal."""
        first = Paragraph(content=[StrongEmphasis([Text("bold")]), Text(" tail")])
        second = Paragraph(content=(StrongEmphasis((Text("bold"),)), Text(" tail")))

        assert first == second

    def test_different_variants_are_not_equal(self) -> None:
        """Test that Emphasis and StrongEmphasis with same content differ."""
        assert Emphasis([Text("x")]) != StrongEmphasis([Text("x")])

    def test_link_title_participates_in_equality(self) -> None:
        """Test that titles distinguish links."""
        assert Link(text=[Text("a")], url="u") != Link(text=[Text("a")], url="u", title="t")


@pytest.mark.unit
class TestNodeCategories:
    """Test block and inline categorization."""

    @pytest.mark.parametrize(
        "node",
        [
            Heading(level=1),
            Paragraph(),
            CodeBlock(content=""),
            List(items=[ListItem()], list_type=UnorderedListType("-")),
            Blockquote(),
            HorizontalRule(),
            HtmlBlock(content="<div></div>"),
        ],
    )
    def test_block_elements(self, node) -> None:
        """Test that block variants are BlockElement instances."""
        assert isinstance(node, BlockElement)
        assert not isinstance(node, InlineElement)

    @pytest.mark.parametrize(
        "node",
        [
            Text("x"),
            Emphasis(),
            StrongEmphasis(),
            Code("x"),
            Link(text=[], url="u"),
            Image(alt=[], url="u"),
            HtmlInline("<b>"),
            SoftBreak(),
            HardBreak(),
        ],
    )
    def test_inline_elements(self, node) -> None:
        """Test that inline variants are InlineElement instances."""
        assert isinstance(node, InlineElement)
        assert not isinstance(node, BlockElement)

    def test_list_item_is_neither_block_nor_inline(self) -> None:
        """Test that ListItem only lives inside a List."""
        item = ListItem()

        assert not isinstance(item, BlockElement)
        assert not isinstance(item, InlineElement)


@pytest.mark.unit
class TestGetNodeChildren:
    """Test get_node_children."""

    def test_document_children(self) -> None:
        """Test that a document's children are its blocks."""
        blocks = [Paragraph(), HorizontalRule()]
        assert get_node_children(MarkdownDocument(blocks=blocks)) == tuple(blocks)

    def test_list_children_are_items(self) -> None:
        """Test that a list's children are its items."""
        items = [ListItem(), ListItem()]
        node = List(items=items, list_type=UnorderedListType("+"))

        assert get_node_children(node) == tuple(items)

    def test_link_and_image_children(self) -> None:
        """Test that link text and image alt are children."""
        assert get_node_children(Link(text=[Text("t")], url="u")) == (Text("t"),)
        assert get_node_children(Image(alt=[Text("a")], url="u")) == (Text("a"),)

    @pytest.mark.parametrize("node", [Text("x"), Code("c"), CodeBlock(content="c"), HorizontalRule(), SoftBreak()])
    def test_leaf_nodes_have_no_children(self, node) -> None:
        """Test that leaves return an empty tuple."""
        assert get_node_children(node) == ()
