#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/block.py
"""Block structure parsing.

The block parser walks preprocessed lines with a cursor. After skipping
blank lines it tries, in priority order, an ATX heading, a horizontal rule,
a fenced code block, a blockquote, a list and finally a paragraph, which
accepts any non-blank line.

Blockquotes contain a complete nested document. Instead of recursing, the
parser keeps an explicit stack of frames, one per open blockquote, so input
nested thousands of levels deep parses without exhausting the call stack.
The resulting tree is still nested that deep, and the generated dataclass
``__eq__`` and ``__repr__`` of the nodes recurse, so comparing or printing
such a tree can raise ``RecursionError``. Use ``mdtree.ast.utils.iter_nodes``
to walk it.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from mdtree.ast.nodes import (
    BlockElement,
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    List,
    ListItem,
    OrderedListType,
    Paragraph,
    UnorderedListType,
)
from mdtree.constants import (
    BLOCKQUOTE_MARKER,
    CODE_FENCES,
    DEFAULT_ORDERED_START,
    HEADING_MARKER,
    HORIZONTAL_RULE_CHARS,
    MAX_HEADING_LEVEL,
    MIN_HORIZONTAL_RULE_CHARS,
    ORDERED_LIST_PATTERN,
    UNORDERED_LIST_MARKERS,
)
from mdtree.parsers.inline import InlineParser
from mdtree.parsers.preprocess import preprocess

logger = logging.getLogger(__name__)


def is_blank(line: str) -> bool:
    """Return True when ``line`` holds only whitespace."""
    return not line.strip()


def _unordered_marker(trimmed: str) -> Optional[str]:
    """Return the bullet of an unordered list item line, if it is one."""
    if len(trimmed) > 1 and trimmed[0] in UNORDERED_LIST_MARKERS and trimmed[1] in " \t":
        return trimmed[0]
    return None


class _Frame:
    """Cursor state for one document level: the top level or one blockquote."""

    __slots__ = ("lines", "index", "blocks", "depth")

    def __init__(self, lines: list[str], depth: int = 0) -> None:
        self.lines = lines
        self.index = 0
        self.blocks: list[BlockElement] = []
        self.depth = depth

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.lines)

    @property
    def current(self) -> str:
        return self.lines[self.index]

    def skip_blank_lines(self) -> None:
        while self.index < len(self.lines) and is_blank(self.lines[self.index]):
            self.index += 1


class BlockParser:
    """Parse preprocessed lines into block elements.

    Parameters
    ----------
    inline_parser : InlineParser or None, default = None
        Parser used for heading, paragraph and list item text

    """

    def __init__(self, inline_parser: Optional[InlineParser] = None) -> None:
        """Initialize the block parser."""
        self.inline_parser = inline_parser or InlineParser()
        self._leaf_matchers: tuple[Callable[[_Frame], Optional[BlockElement]], ...] = (
            self._parse_atx_heading,
            self._parse_horizontal_rule,
            self._parse_fenced_code_block,
        )

    def parse(self, lines: list[str]) -> list[BlockElement]:
        """Parse ``lines`` into a list of blocks.

        Parameters
        ----------
        lines : list of str
            Output of ``preprocess``

        Returns
        -------
        list of BlockElement
            Top-level blocks in source order

        """
        stack = [_Frame(lines)]
        max_depth = 0

        while True:
            frame = stack[-1]
            frame.skip_blank_lines()

            if frame.exhausted:
                stack.pop()
                if not stack:
                    if max_depth:
                        logger.debug("Deepest blockquote nesting: %d", max_depth)
                    return frame.blocks
                stack[-1].blocks.append(Blockquote(content=frame.blocks))
                continue

            block = self._match_leaf_block(frame)
            if block is None:
                quote_text = self._collect_blockquote(frame)
                if quote_text is not None:
                    stack.append(_Frame(preprocess(quote_text), depth=frame.depth + 1))
                    max_depth = max(max_depth, frame.depth + 1)
                    continue
                block = self._parse_list(frame) or self._parse_paragraph(frame)

            if block is None:
                frame.index += 1
            else:
                frame.blocks.append(block)

    def _match_leaf_block(self, frame: _Frame) -> Optional[BlockElement]:
        for matcher in self._leaf_matchers:
            block = matcher(frame)
            if block is not None:
                return block
        return None

    def _parse_atx_heading(self, frame: _Frame) -> Optional[Heading]:
        trimmed = frame.current.strip()
        if not trimmed.startswith(HEADING_MARKER):
            return None

        rest = trimmed.lstrip(HEADING_MARKER)
        level = len(trimmed) - len(rest)
        if level > MAX_HEADING_LEVEL:
            return None
        # "#5bolt" is not a heading
        if rest and rest[0] not in " \t":
            return None

        frame.index += 1
        return Heading(level=level, content=self.inline_parser.parse(rest.strip()))

    def _parse_horizontal_rule(self, frame: _Frame) -> Optional[HorizontalRule]:
        trimmed = frame.current.strip()
        marks = trimmed.replace(" ", "")
        if len(marks) < MIN_HORIZONTAL_RULE_CHARS:
            return None

        rule_char = marks[0]
        if rule_char not in HORIZONTAL_RULE_CHARS or marks.count(rule_char) != len(marks):
            return None

        frame.index += 1
        return HorizontalRule()

    def _parse_fenced_code_block(self, frame: _Frame) -> Optional[CodeBlock]:
        """Parse a fenced code block; an unclosed fence runs to end of input."""
        trimmed = frame.current.strip()
        fence = trimmed[:3]
        if fence not in CODE_FENCES:
            return None

        info = trimmed[3:].strip() or None
        frame.index += 1

        code_lines: list[str] = []
        while not frame.exhausted:
            line = frame.current
            frame.index += 1
            if line.strip().startswith(fence):
                break
            code_lines.append(line)

        return CodeBlock(content="\n".join(code_lines), info=info)

    def _collect_blockquote(self, frame: _Frame) -> Optional[str]:
        """Consume a blockquote run and return its text with markers removed.

        Blank lines inside the run are kept so paragraph breaks survive.
        Returns None when the current line does not open a blockquote.
        """
        if not frame.current.strip().startswith(BLOCKQUOTE_MARKER):
            return None

        quote_lines: list[str] = []
        while not frame.exhausted:
            trimmed = frame.current.strip()
            if trimmed.startswith(BLOCKQUOTE_MARKER):
                content = trimmed[1:]
                quote_lines.append(content[1:] if content.startswith(" ") else content)
            elif not trimmed:
                quote_lines.append("")
            else:
                break
            frame.index += 1

        return "\n".join(quote_lines)

    def _parse_list(self, frame: _Frame) -> Optional[List]:
        trimmed = frame.current.strip()

        marker = _unordered_marker(trimmed)
        if marker is not None:
            return self._parse_unordered_list(frame, marker)

        match = ORDERED_LIST_PATTERN.match(trimmed)
        if match is not None:
            return self._parse_ordered_list(frame, match.group(1), match.group(2))

        return None

    def _make_item(self, text: str) -> ListItem:
        return ListItem(content=(Paragraph(content=self.inline_parser.parse(text)),), tight=True)

    def _parse_unordered_list(self, frame: _Frame, marker: str) -> List:
        items: list[ListItem] = []
        while not frame.exhausted:
            trimmed = frame.current.strip()
            if not trimmed:
                frame.index += 1
                continue
            if _unordered_marker(trimmed) != marker:
                break
            items.append(self._make_item(trimmed[2:].strip()))
            frame.index += 1

        return List(items=items, list_type=UnorderedListType(marker=marker))

    def _parse_ordered_list(self, frame: _Frame, first_number: str, delimiter: str) -> List:
        # Only ASCII digit runs are read as numbers; other Unicode digits and
        # runs beyond the interpreter's int conversion limit start at 1
        try:
            start_number = int(first_number) if first_number.isascii() else DEFAULT_ORDERED_START
        except ValueError:
            start_number = DEFAULT_ORDERED_START

        items: list[ListItem] = []
        while not frame.exhausted:
            trimmed = frame.current.strip()
            if not trimmed:
                frame.index += 1
                continue
            match = ORDERED_LIST_PATTERN.match(trimmed)
            if match is None:
                break
            items.append(self._make_item(trimmed[match.end() :].lstrip()))
            frame.index += 1

        return List(items=items, list_type=OrderedListType(start_number=start_number, delimiter=delimiter))

    def _parse_paragraph(self, frame: _Frame) -> Optional[Paragraph]:
        """Collect consecutive non-blank lines into one paragraph.

        Leading whitespace is dropped per line; trailing whitespace is kept
        so the inline parser can see hard breaks.
        """
        paragraph_lines: list[str] = []
        while not frame.exhausted and not is_blank(frame.current):
            paragraph_lines.append(frame.current.lstrip())
            frame.index += 1

        if not paragraph_lines:
            return None
        return Paragraph(content=self.inline_parser.parse("\n".join(paragraph_lines)))


__all__ = ["BlockParser", "is_blank"]
