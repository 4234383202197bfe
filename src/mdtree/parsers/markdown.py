#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/markdown.py
"""Markdown to document tree conversion.

This module ties the pipeline together: preprocessing, block parsing and
inline parsing. Parsing never fails for string input; malformed constructs
degrade to literal text or to shorter block runs.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from mdtree.ast.nodes import MarkdownDocument
from mdtree.exceptions import FileAccessError, FileNotFoundError, ValidationError
from mdtree.parsers.block import BlockParser
from mdtree.parsers.inline import InlineParser
from mdtree.parsers.preprocess import preprocess
from mdtree.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class MarkdownParser:
    r"""Convert Markdown text to a ``MarkdownDocument``.

    The parser holds no per-call state. A single instance may be shared
    freely, including across threads.

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> len(doc.blocks)
        2

    """

    def __init__(self) -> None:
        """Initialize the inline and block parsers."""
        self._inline_parser = InlineParser()
        self._block_parser = BlockParser(self._inline_parser)

    def parse(self, markdown: str) -> MarkdownDocument:
        """Parse Markdown source into a document tree.

        Parameters
        ----------
        markdown : str
            Markdown source text. May be empty.

        Returns
        -------
        MarkdownDocument
            Document whose ``blocks`` hold the parsed content; ``metadata``
            is always empty

        Raises
        ------
        ValidationError
            If ``markdown`` is not a string

        """
        if not isinstance(markdown, str):
            raise ValidationError(
                f"Markdown input must be a string, got {type(markdown).__name__}",
                parameter_name="markdown",
                parameter_value=markdown,
            )

        lines = preprocess(markdown)
        blocks = self._block_parser.parse(lines)
        logger.debug("Parsed %d lines into %d top-level blocks", len(lines), len(blocks))
        return MarkdownDocument(blocks=blocks)

    def parse_file(self, path: Union[str, Path]) -> MarkdownDocument:
        """Read a Markdown file and parse it.

        The file is read as bytes and decoded with encoding detection.

        Parameters
        ----------
        path : str or Path
            Path to the Markdown file

        Returns
        -------
        MarkdownDocument
            Parsed document

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist
        FileAccessError
            If ``path`` is a directory or cannot be read

        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(str(file_path))
        if not file_path.is_file():
            raise FileAccessError(str(file_path), message=f"Not a regular file: {file_path}")

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise FileAccessError(str(file_path), original_error=e) from e

        logger.debug("Read %d bytes from %s", len(data), file_path)
        return self.parse(read_text_with_encoding_detection(data))


# Shared by the module-level helpers; the parser is stateless between calls
_default_parser = MarkdownParser()


def parse(markdown: str) -> MarkdownDocument:
    r"""Parse Markdown source into a document tree.

    This is a convenience function around a shared ``MarkdownParser``.

    Parameters
    ----------
    markdown : str
        Markdown source text

    Returns
    -------
    MarkdownDocument
        Parsed document

    Examples
    --------
    >>> from mdtree import parse
    >>> doc = parse("# Hello\n\nWorld")
    >>> len(doc.blocks)
    2

    """
    return _default_parser.parse(markdown)


def parse_file(path: Union[str, Path]) -> MarkdownDocument:
    """Read and parse a Markdown file; see ``MarkdownParser.parse_file``."""
    return _default_parser.parse_file(path)


__all__ = ["MarkdownParser", "parse", "parse_file"]
