#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/outline.py
"""Human-readable outline rendering of a parsed tree.

The outline shows one node per line, indented by nesting depth. Container
nodes show their scalar attributes in parentheses and leaf nodes show their
text payload, truncated to a configurable length.

Examples
--------
    >>> from mdtree import parse
    >>> from mdtree.ast.outline import OutlineFormatter
    >>> print(OutlineFormatter().format(parse("# Hello *world*")))
    MarkdownDocument
      Heading(level=1)
        Text 'Hello '
        Emphasis
          Text 'world'

"""

from __future__ import annotations

from typing import Iterable, Optional

from mdtree.ast.nodes import (
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
    Link,
    List,
    ListItem,
    MarkdownDocument,
    Node,
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
)
from mdtree.ast.visitors import NodeVisitor
from mdtree.options import OutlineOptions


class OutlineFormatter(NodeVisitor):
    """Render a tree as an indented outline.

    Parameters
    ----------
    options : OutlineOptions or None, default = None
        Indentation and payload display options

    """

    def __init__(self, options: Optional[OutlineOptions] = None):
        """Initialize the formatter with options."""
        self.options = options or OutlineOptions()
        self._lines: list[str] = []
        self._depth = 0

    def format(self, node: Node) -> str:
        """Render ``node`` and its descendants.

        Parameters
        ----------
        node : Node
            Root of the subtree to render, usually a MarkdownDocument

        Returns
        -------
        str
            Outline text, one node per line, without a trailing newline

        """
        self._lines = []
        self._depth = 0
        node.accept(self)
        return "\n".join(self._lines)

    def _truncate(self, text: str) -> str:
        limit = self.options.max_text_length
        if len(text) <= limit:
            return text
        return text[: limit - 3] + "..."

    def _emit(self, label: str, payload: Optional[str] = None) -> None:
        line = " " * (self._depth * self.options.indent_width) + label
        if payload is not None and self.options.show_text:
            line += " " + repr(self._truncate(payload))
        self._lines.append(line)

    def _visit_children(self, children: Iterable[Node]) -> None:
        self._depth += 1
        for child in children:
            child.accept(self)
        self._depth -= 1

    def visit_markdown_document(self, node: MarkdownDocument) -> None:
        """Render the document root."""
        self._emit("MarkdownDocument")
        self._visit_children(node.blocks)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        self._emit(f"Heading(level={node.level})")
        self._visit_children(node.content)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._emit("Paragraph")
        self._visit_children(node.content)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node."""
        label = f"CodeBlock(info={node.info!r})" if node.info is not None else "CodeBlock"
        self._emit(label, node.content)

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        if isinstance(node.list_type, OrderedListType):
            label = f"List(ordered, start={node.list_type.start_number}, delimiter={node.list_type.delimiter!r})"
        else:
            label = f"List(unordered, marker={node.list_type.marker!r})"
        self._emit(label)
        self._visit_children(node.items)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._emit("ListItem" if node.tight else "ListItem(loose)")
        self._visit_children(node.content)

    def visit_blockquote(self, node: Blockquote) -> None:
        """Render a Blockquote node."""
        self._emit("Blockquote")
        self._visit_children(node.content)

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._emit("HorizontalRule")

    def visit_html_block(self, node: HtmlBlock) -> None:
        """Render an HtmlBlock node."""
        self._emit("HtmlBlock", node.content)

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._emit("Text", node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._emit("Emphasis")
        self._visit_children(node.content)

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        """Render a StrongEmphasis node."""
        self._emit("StrongEmphasis")
        self._visit_children(node.content)

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._emit("Code", node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        label = f"Link(url={node.url!r}"
        if node.title is not None:
            label += f", title={node.title!r}"
        self._emit(label + ")")
        self._visit_children(node.text)

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        label = f"Image(url={node.url!r}"
        if node.title is not None:
            label += f", title={node.title!r}"
        self._emit(label + ")")
        self._visit_children(node.alt)

    def visit_html_inline(self, node: HtmlInline) -> None:
        """Render an HtmlInline node."""
        self._emit("HtmlInline", node.content)

    def visit_soft_break(self, node: SoftBreak) -> None:
        """Render a SoftBreak node."""
        self._emit("SoftBreak")

    def visit_hard_break(self, node: HardBreak) -> None:
        """Render a HardBreak node."""
        self._emit("HardBreak")


def format_outline(node: Node, options: Optional[OutlineOptions] = None) -> str:
    """Render ``node`` as an outline with the given options."""
    return OutlineFormatter(options).format(node)


__all__ = ["OutlineFormatter", "format_outline"]
