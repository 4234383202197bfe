#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/preprocess.py
"""Text preprocessing ahead of block parsing.

Two steps turn raw input into the line sequence the block parser scans:
tab expansion to fixed four-column stops, then splitting on every newline
convention.
"""

from __future__ import annotations

from mdtree.constants import LINE_BREAK_PATTERN, TAB_WIDTH


def expand_tabs(text: str, tab_width: int = TAB_WIDTH) -> str:
    r"""Replace each tab with spaces up to the next multiple of ``tab_width``.

    The column counter resets only after ``"\n"``. Other characters,
    including ``"\r"``, advance it by one.

    Parameters
    ----------
    text : str
        Raw input text
    tab_width : int, default = 4
        Distance between tab stops

    Returns
    -------
    str
        Text without tab characters

    Examples
    --------
    >>> expand_tabs("a\tb")
    'a   b'
    >>> expand_tabs("\tx\n\ty")
    '    x\n    y'

    """
    if "\t" not in text:
        return text

    parts: list[str] = []
    column = 0
    for char in text:
        if char == "\t":
            spaces = tab_width - (column % tab_width)
            parts.append(" " * spaces)
            column += spaces
        elif char == "\n":
            parts.append(char)
            column = 0
        else:
            parts.append(char)
            column += 1
    return "".join(parts)


def split_lines(text: str) -> list[str]:
    r"""Split text into logical lines on any newline sequence.

    ``"\r\n"`` counts as a single break. A trailing newline leaves a
    trailing empty line; empty input gives no lines at all.
    """
    if not text:
        return []
    return LINE_BREAK_PATTERN.split(text)


def preprocess(text: str) -> list[str]:
    """Expand tabs and split ``text`` into the lines the block parser consumes."""
    return split_lines(expand_tabs(text))


__all__ = ["expand_tabs", "split_lines", "preprocess"]
