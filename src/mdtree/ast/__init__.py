#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/__init__.py
"""Document tree produced by the Markdown parser.

The module consists of several components:

- nodes: node classes representing document structure
- visitors: visitor pattern implementation for read-only traversal
- serialization: JSON serialization and deserialization of trees
- outline: indented, human-readable tree rendering
- utils: text extraction and iterative tree walks

Examples
--------
Build a tree by hand and validate it:

    >>> from mdtree.ast import MarkdownDocument, Heading, Paragraph, Text, ValidationVisitor
    >>> doc = MarkdownDocument(blocks=[
    ...     Heading(level=1, content=[Text("Title")]),
    ...     Paragraph(content=[Text("Hello world")]),
    ... ])
    >>> doc.accept(ValidationVisitor())

"""

from __future__ import annotations

from mdtree.ast.nodes import (
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
    ListType,
    MarkdownDocument,
    Node,
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
    UnorderedListType,
    get_node_children,
)
from mdtree.ast.outline import OutlineFormatter, format_outline
from mdtree.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mdtree.ast.utils import extract_text, iter_nodes, max_blockquote_depth
from mdtree.ast.visitors import NodeVisitor, ValidationVisitor

__all__ = [
    # Nodes
    "Node",
    "BlockElement",
    "InlineElement",
    "MarkdownDocument",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "List",
    "ListItem",
    "ListType",
    "UnorderedListType",
    "OrderedListType",
    "Blockquote",
    "HorizontalRule",
    "HtmlBlock",
    "Text",
    "Emphasis",
    "StrongEmphasis",
    "Code",
    "Link",
    "Image",
    "HtmlInline",
    "SoftBreak",
    "HardBreak",
    "get_node_children",
    # Visitors
    "NodeVisitor",
    "ValidationVisitor",
    "OutlineFormatter",
    "format_outline",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
    # Utilities
    "extract_text",
    "iter_nodes",
    "max_blockquote_depth",
]
