"""mdtree - parse Markdown into a typed, immutable document tree.

mdtree converts Markdown text into a tree of block elements (headings,
paragraphs, fenced code, lists, blockquotes, horizontal rules) holding
inline elements (text, emphasis, code spans, links, images and line
breaks). Parsing never fails: malformed Markdown degrades to literal text.

Examples
--------
Parse a string:

    >>> from mdtree import parse
    >>> doc = parse("# Hello\\n\\nSome **bold** text.")
    >>> doc.blocks[0].level
    1

Parse a file and dump the tree as JSON:

    >>> from mdtree import parse_file
    >>> from mdtree.ast import ast_to_json
    >>> print(ast_to_json(parse_file("README.md")))

See Also
--------
mdtree.ast : Node definitions, visitors and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdtree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdtree.ast.nodes import (  # noqa: E402
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
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
    UnorderedListType,
)
from mdtree.exceptions import FileAccessError, FileError, FileNotFoundError, MdtreeError, ValidationError  # noqa: E402
from mdtree.parsers.markdown import MarkdownParser, parse, parse_file  # noqa: E402

__all__ = [
    "__version__",
    # Entry points
    "parse",
    "parse_file",
    "MarkdownParser",
    # Nodes
    "MarkdownDocument",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "List",
    "ListItem",
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
    # Exceptions
    "MdtreeError",
    "ValidationError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
]
