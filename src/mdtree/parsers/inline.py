#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/inline.py
"""Inline content parsing.

The inline parser turns the text of one block into a sequence of inline
nodes. It scans left to right and, at each position, tries these rules in
priority order:

1. Backslash escape
2. Entity reference
3. Strong emphasis (``**`` / ``__``)
4. Emphasis (``*`` / ``_``)
5. Code span
6. Image
7. Link
8. Hard break
9. Soft break

When nothing matches, the character becomes literal text and the text run
grows until the next position where one of the rules would match.

Every rule is implemented as a scanner that decides whether it matches and
where the match ends without building any nodes. It hands back a builder
that constructs the node on demand. The plain-text rule probes scanners at
each candidate position, so probing stays cheap and never recurses into
nested content.

Unterminated markers are never an error: the opening character falls back
to literal text and scanning resumes right after it.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from mdtree.ast.nodes import (
    Code,
    Emphasis,
    HardBreak,
    Image,
    InlineElement,
    Link,
    SoftBreak,
    StrongEmphasis,
    Text,
)
from mdtree.constants import (
    CODE_SPAN_DELIMITER,
    EMPHASIS_DELIMITERS,
    ENTITY_MAX_LOOKAHEAD,
    ESCAPABLE_CHARS,
    STRONG_DELIMITERS,
)
from mdtree.parsers.entities import decode_entity_reference

logger = logging.getLogger(__name__)

# A successful scan: end offset (exclusive) plus a builder for the node
Match = tuple[int, Callable[[], InlineElement]]
Scanner = Callable[[str, int], Optional[Match]]

# Characters at which some rule can start a match
_TRIGGER_PATTERN = re.compile(r"[\\&*_`!\[ \n]")


def find_unescaped_delimiter(text: str, delimiter: str, start: int) -> int:
    r"""Return the index of the first unescaped ``delimiter`` at or after ``start``.

    An occurrence is escaped when it is preceded by an odd number of
    consecutive backslashes. Backslashes are counted back to the start of
    ``text``, not only back to ``start``.

    Parameters
    ----------
    text : str
        Text to search
    delimiter : str
        Delimiter to look for, for example ``"**"`` or ``"_"``
    start : int
        First index to consider

    Returns
    -------
    int
        Index of the match, or -1 when there is none

    Examples
    --------
    >>> find_unescaped_delimiter(r"a\*b*", "*", 0)
    4
    >>> find_unescaped_delimiter(r"a\\*b", "*", 0)
    3

    """
    index = text.find(delimiter, start)
    while index != -1:
        backslashes = 0
        cursor = index - 1
        while cursor >= 0 and text[cursor] == "\\":
            backslashes += 1
            cursor -= 1
        if backslashes % 2 == 0:
            return index
        index = text.find(delimiter, index + 1)
    return -1


def _split_link_destination(destination: str) -> tuple[str, Optional[str]]:
    """Split the text between ``(`` and ``)`` into a URL and an optional title."""
    trimmed = destination.strip()
    space = trimmed.find(" ")
    if space == -1:
        return trimmed, None

    remainder = trimmed[space + 1 :].strip()
    if len(remainder) > 2 and remainder[0] in "\"'" and remainder[-1] == remainder[0]:
        return trimmed[:space], remainder[1:-1]
    return trimmed, None


class InlineParser:
    """Parse inline Markdown into a sequence of inline nodes.

    The parser keeps no per-call state, so one instance can be shared by
    any number of threads.

    Examples
    --------
    >>> InlineParser().parse("**bold** and *italic*")
    [StrongEmphasis(content=(Text(content='bold'),)), Text(content=' and '), Emphasis(content=(Text(content='italic'),))]

    """

    def __init__(self) -> None:
        """Initialize the scanner dispatch table."""
        # Rules keyed by the character they must start with, in priority order
        self._scanners: dict[str, tuple[Scanner, ...]] = {
            "\\": (self._scan_escape, self._scan_hard_break),
            "&": (self._scan_entity,),
            CODE_SPAN_DELIMITER: (self._scan_code,),
            "!": (self._scan_image,),
            "[": (self._scan_link,),
            " ": (self._scan_hard_break,),
            "\n": (self._scan_soft_break,),
        }
        for delimiter in EMPHASIS_DELIMITERS:
            self._scanners[delimiter] = (self._scan_strong_emphasis, self._scan_emphasis)

    def parse(self, text: str) -> list[InlineElement]:
        """Parse ``text`` into inline nodes.

        Adjacent literal text produced by escapes, entities and the
        plain-text rule is merged into a single ``Text`` node.

        Parameters
        ----------
        text : str
            Inline source, possibly spanning several lines

        Returns
        -------
        list of InlineElement
            Parsed nodes in source order; empty for empty input

        """
        elements: list[InlineElement] = []
        pending_text: list[str] = []
        position = 0
        length = len(text)

        while position < length:
            match = self._match_at(text, position)
            if match is None:
                end = self._scan_text(text, position)
                pending_text.append(text[position:end])
                position = end
                continue

            end, build = match
            node = build()
            if isinstance(node, Text):
                pending_text.append(node.content)
            else:
                if pending_text:
                    elements.append(Text("".join(pending_text)))
                    pending_text = []
                elements.append(node)
            position = end

        if pending_text:
            elements.append(Text("".join(pending_text)))
        return elements

    def _match_at(self, text: str, position: int) -> Optional[Match]:
        for scanner in self._scanners.get(text[position], ()):
            match = scanner(text, position)
            if match is not None:
                return match
        return None

    def _scan_text(self, text: str, position: int) -> int:
        """Return the end of the literal text run starting at ``position``.

        At least one character is always consumed.
        """
        search_from = position + 1
        while True:
            trigger = _TRIGGER_PATTERN.search(text, search_from)
            if trigger is None:
                return len(text)
            candidate = trigger.start()
            if self._match_at(text, candidate) is not None:
                return candidate
            search_from = candidate + 1

    def _scan_escape(self, text: str, position: int) -> Optional[Match]:
        following = position + 1
        if following >= len(text) or text[following] not in ESCAPABLE_CHARS:
            return None
        char = text[following]
        return following + 1, lambda: Text(char)

    def _scan_entity(self, text: str, position: int) -> Optional[Match]:
        semicolon = text.find(";", position + 1, position + ENTITY_MAX_LOOKAHEAD)
        if semicolon == -1:
            return None
        replacement = decode_entity_reference(text[position + 1 : semicolon])
        if replacement is None:
            return None
        return semicolon + 1, lambda: Text(replacement)

    def _scan_strong_emphasis(self, text: str, position: int) -> Optional[Match]:
        delimiter = text[position : position + 2]
        if delimiter not in STRONG_DELIMITERS:
            return None
        content_start = position + 2
        if content_start >= len(text):
            return None
        close = find_unescaped_delimiter(text, delimiter, content_start)
        if close == -1:
            return None
        content = text[content_start:close]
        return close + 2, lambda: StrongEmphasis(self.parse(content))

    def _scan_emphasis(self, text: str, position: int) -> Optional[Match]:
        delimiter = text[position]
        content_start = position + 1
        if text.startswith(delimiter, content_start):
            return None
        # A lone underscore right after another one is the tail of a failed strong run
        if delimiter == "_" and position > 0 and text[position - 1] == "_":
            return None
        close = find_unescaped_delimiter(text, delimiter, content_start)
        if close == -1:
            return None
        content = text[content_start:close]
        return close + 1, lambda: Emphasis(self.parse(content))

    def _scan_code(self, text: str, position: int) -> Optional[Match]:
        content_start = position + 1
        if content_start >= len(text):
            return None
        close = text.find(CODE_SPAN_DELIMITER, content_start)
        if close == -1:
            return None
        content = text[content_start:close]
        return close + 1, lambda: Code(content)

    def _scan_link_parts(self, text: str, position: int) -> Optional[tuple[int, str, str, Optional[str]]]:
        """Locate ``[text](destination)`` starting at ``position``.

        Returns the end offset, the raw link text, the URL and the title.
        """
        if not text.startswith("[", position):
            return None
        close_bracket = text.find("]", position + 1)
        if close_bracket == -1 or not text.startswith("(", close_bracket + 1):
            return None
        close_paren = text.find(")", close_bracket + 2)
        if close_paren == -1:
            return None
        url, title = _split_link_destination(text[close_bracket + 2 : close_paren])
        return close_paren + 1, text[position + 1 : close_bracket], url, title

    def _scan_link(self, text: str, position: int) -> Optional[Match]:
        parts = self._scan_link_parts(text, position)
        if parts is None:
            return None
        end, label, url, title = parts
        return end, lambda: Link(text=self.parse(label), url=url, title=title)

    def _scan_image(self, text: str, position: int) -> Optional[Match]:
        parts = self._scan_link_parts(text, position + 1)
        if parts is None:
            return None
        end, label, url, title = parts
        return end, lambda: Image(alt=self.parse(label), url=url, title=title)

    def _scan_hard_break(self, text: str, position: int) -> Optional[Match]:
        if text.startswith("  \n", position):
            return position + 3, HardBreak
        if text.startswith("\\\n", position):
            return position + 2, HardBreak
        return None

    def _scan_soft_break(self, text: str, position: int) -> Optional[Match]:
        return position + 1, SoftBreak


__all__ = ["InlineParser", "find_unescaped_delimiter"]
