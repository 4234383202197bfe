#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/nodes.py
"""Node classes for the parsed Markdown document tree.

This module defines the complete node hierarchy produced by the parser. The
tree has two levels of structure: block elements that form the document
outline, and inline elements that carry the text and formatting inside a
block.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes (``BlockElement``):
    - Heading, Paragraph, CodeBlock, List, Blockquote
    - HorizontalRule, HtmlBlock

Inline nodes (``InlineElement``):
    - Text, Emphasis, StrongEmphasis, Code
    - Link, Image, HtmlInline
    - SoftBreak, HardBreak

Supporting types:
    - MarkdownDocument (the root), ListItem
    - UnorderedListType, OrderedListType (the ``ListType`` union)

Every node is a frozen dataclass whose children are stored as tuples, so a
tree returned by the parser cannot be modified in place. Sequences passed to
a constructor are converted to tuples. Equality is structural.

``HtmlBlock`` and ``HtmlInline`` are part of the model for consumers that
build trees by hand; the parser never produces them.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from mdtree.constants import MAX_HEADING_LEVEL, ORDERED_LIST_DELIMITERS, UNORDERED_LIST_MARKERS


def _freeze(node: Node, name: str) -> None:
    """Store the named sequence field of a frozen node as a tuple."""
    value = getattr(node, name)
    if not isinstance(value, tuple):
        object.__setattr__(node, name, tuple(value))


class Node(ABC):
    """Base class for all tree nodes.

    All nodes support the visitor pattern through ``accept``.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class BlockElement(Node):
    """Base class for block-level nodes."""


class InlineElement(Node):
    """Base class for inline nodes."""


# ============================================================================
# List types
# ============================================================================


@dataclass(frozen=True)
class UnorderedListType:
    """Bulleted list marked with ``-``, ``*`` or ``+``.

    Parameters
    ----------
    marker : str
        The single bullet character shared by every item in the list

    """

    marker: str

    def __post_init__(self) -> None:
        """Validate the bullet marker."""
        if self.marker not in UNORDERED_LIST_MARKERS:
            raise ValueError(f"Unordered list marker must be one of '-', '*', '+', got {self.marker!r}")


@dataclass(frozen=True)
class OrderedListType:
    """Numbered list such as ``1.`` or ``3)``.

    Parameters
    ----------
    start_number : int, default = 1
        Number of the first item as written in the source
    delimiter : str, default = "."
        Character following the number, ``.`` or ``)``

    """

    start_number: int = 1
    delimiter: str = "."

    def __post_init__(self) -> None:
        """Validate the number delimiter."""
        if self.delimiter not in ORDERED_LIST_DELIMITERS:
            raise ValueError(f"Ordered list delimiter must be '.' or ')', got {self.delimiter!r}")


ListType = Union[UnorderedListType, OrderedListType]


# ============================================================================
# Root
# ============================================================================


@dataclass(frozen=True)
class MarkdownDocument(Node):
    """Root node of a parsed document.

    Parameters
    ----------
    blocks : tuple of BlockElement, default = ()
        Top-level blocks in source order; empty for blank input
    metadata : mapping of str to str, default = empty mapping
        Reserved for document-level information; the parser leaves it empty.
        Stored as a read-only copy of the mapping passed in.

    """

    blocks: tuple[BlockElement, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Store blocks as a tuple and metadata as a read-only mapping."""
        _freeze(self, "blocks")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_markdown_document method

        Returns
        -------
        Any
            Result from visitor.visit_markdown_document(self)

        """
        return visitor.visit_markdown_document(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(BlockElement):
    """ATX heading (``#`` through ``######``).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : tuple of InlineElement, default = ()
        Inline nodes representing heading text

    """

    level: int
    content: tuple[InlineElement, ...] = ()

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(BlockElement):
    """Paragraph of inline content.

    Parameters
    ----------
    content : tuple of InlineElement, default = ()
        Inline nodes in source order

    """

    content: tuple[InlineElement, ...] = ()

    def __post_init__(self) -> None:
        """Store content as a tuple."""
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class CodeBlock(BlockElement):
    """Fenced code block.

    The content is the raw text between the fences joined with ``\\n``.
    Escapes and entity references inside it are never decoded.

    Parameters
    ----------
    content : str
        Code text without the fence lines
    info : str or None, default = None
        Info string after the opening fence (typically a language name)

    """

    content: str
    info: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class ListItem(Node):
    """One item of a list.

    Items produced by the parser hold exactly one Paragraph and are always
    tight.

    Parameters
    ----------
    content : tuple of BlockElement, default = ()
        Blocks inside the item
    tight : bool, default = True
        Whether the item renders without paragraph spacing

    """

    content: tuple[BlockElement, ...] = ()
    tight: bool = True

    def __post_init__(self) -> None:
        """Store content as a tuple."""
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class List(BlockElement):
    """Ordered or unordered list.

    Parameters
    ----------
    items : tuple of ListItem
        List items; never empty
    list_type : UnorderedListType or OrderedListType
        Marker style of the list

    """

    items: tuple[ListItem, ...]
    list_type: ListType

    def __post_init__(self) -> None:
        """Validate that the list has at least one item."""
        _freeze(self, "items")
        if not self.items:
            raise ValueError("List must contain at least one item")

    @property
    def ordered(self) -> bool:
        """Whether this is a numbered list."""
        return isinstance(self.list_type, OrderedListType)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass(frozen=True)
class Blockquote(BlockElement):
    """Block quote containing nested blocks.

    Blockquotes may contain any block, including other blockquotes, to
    arbitrary depth.

    Parameters
    ----------
    content : tuple of BlockElement, default = ()
        Blocks parsed from the quoted text

    """

    content: tuple[BlockElement, ...] = ()

    def __post_init__(self) -> None:
        """Store content as a tuple."""
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this blockquote."""
        return visitor.visit_blockquote(self)


@dataclass(frozen=True)
class HorizontalRule(BlockElement):
    """Thematic break written as ``---``, ``***`` or ``___``."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this horizontal rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass(frozen=True)
class HtmlBlock(BlockElement):
    """Raw HTML block.

    Parameters
    ----------
    content : str
        Literal HTML, passed through unchanged

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(InlineElement):
    """Plain text with escapes and entity references already decoded.

    Parameters
    ----------
    content : str
        Text content

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Emphasis(InlineElement):
    """Emphasized (italic) text written with ``*`` or ``_``.

    Parameters
    ----------
    content : tuple of InlineElement, default = ()
        Emphasized inline nodes

    """

    content: tuple[InlineElement, ...] = ()

    def __post_init__(self) -> None:
        """Store content as a tuple."""
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass(frozen=True)
class StrongEmphasis(InlineElement):
    """Strongly emphasized (bold) text written with ``**`` or ``__``.

    Parameters
    ----------
    content : tuple of InlineElement, default = ()
        Emphasized inline nodes

    """

    content: tuple[InlineElement, ...] = ()

    def __post_init__(self) -> None:
        """Store content as a tuple."""
        _freeze(self, "content")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong_emphasis(self)


@dataclass(frozen=True)
class Code(InlineElement):
    """Inline code span; the content is kept verbatim.

    Parameters
    ----------
    content : str
        Code text between the backticks

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass(frozen=True)
class Link(InlineElement):
    """Inline hyperlink ``[text](url "title")``.

    Parameters
    ----------
    text : tuple of InlineElement
        Inline nodes forming the link text
    url : str
        Link destination
    title : str or None, default = None
        Optional link title

    """

    text: tuple[InlineElement, ...]
    url: str
    title: Optional[str] = None

    def __post_init__(self) -> None:
        """Store link text as a tuple."""
        _freeze(self, "text")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_link method

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Image(InlineElement):
    """Inline image ``![alt](url "title")``.

    Parameters
    ----------
    alt : tuple of InlineElement
        Inline nodes forming the alternative text
    url : str
        Image source
    title : str or None, default = None
        Optional image title

    """

    alt: tuple[InlineElement, ...]
    url: str
    title: Optional[str] = None

    def __post_init__(self) -> None:
        """Store alt text as a tuple."""
        _freeze(self, "alt")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass(frozen=True)
class HtmlInline(InlineElement):
    """Raw inline HTML.

    Parameters
    ----------
    content : str
        Literal HTML, passed through unchanged

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


@dataclass(frozen=True)
class SoftBreak(InlineElement):
    """Newline inside a paragraph; semantically a space."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass(frozen=True)
class HardBreak(InlineElement):
    """Forced line break (two trailing spaces or a trailing backslash)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this hard break."""
        return visitor.visit_hard_break(self)


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Get the direct child nodes of a node in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    tuple of Node
        Child nodes (empty tuple for leaf nodes)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), StrongEmphasis([Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, MarkdownDocument):
        return node.blocks
    if isinstance(node, (Heading, Paragraph, Blockquote, ListItem, Emphasis, StrongEmphasis)):
        return node.content
    if isinstance(node, List):
        return node.items
    if isinstance(node, Link):
        return node.text
    if isinstance(node, Image):
        return node.alt
    return ()
