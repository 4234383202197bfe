#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/__init__.py
"""Markdown parsing pipeline.

- preprocess: tab expansion and line splitting
- block: block structure (headings, rules, fenced code, quotes, lists, paragraphs)
- inline: emphasis, code spans, links, images, escapes, entities and breaks
- entities: named and numeric entity references
- markdown: the ``MarkdownParser`` facade and ``parse`` / ``parse_file`` helpers

"""

from mdtree.parsers.block import BlockParser
from mdtree.parsers.entities import HTML_ENTITIES, decode_entity_reference
from mdtree.parsers.inline import InlineParser, find_unescaped_delimiter
from mdtree.parsers.markdown import MarkdownParser, parse, parse_file
from mdtree.parsers.preprocess import expand_tabs, preprocess, split_lines

__all__ = [
    "BlockParser",
    "InlineParser",
    "MarkdownParser",
    "HTML_ENTITIES",
    "decode_entity_reference",
    "expand_tabs",
    "find_unescaped_delimiter",
    "parse",
    "parse_file",
    "preprocess",
    "split_lines",
]
