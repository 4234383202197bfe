#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

Consumers of a parsed document (renderers, exporters, analysers) traverse it
read-only by implementing a visitor. Each node's ``accept`` method calls the
matching ``visit_*`` method, so consumers dispatch on node type without
isinstance chains.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

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
    MarkdownDocument,
    Node,
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
    UnorderedListType,
)
from mdtree.constants import MAX_HEADING_LEVEL
from mdtree.exceptions import ValidationError


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Subclasses implement a ``visit_*`` method for every node type. Methods
    return Any (typically None for side-effect visitors, or accumulated
    results for transforming visitors).

    Examples
    --------
    Visitor that counts headings:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_markdown_document(self, node):
        ...         for block in node.blocks:
        ...             block.accept(self)
        ...
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...
        ...     # remaining visit_* methods return None
        >>> counter = HeadingCounter()
        >>> document.accept(counter)

    """

    @abstractmethod
    def visit_markdown_document(self, node: MarkdownDocument) -> Any:
        """Visit the document root.

        Parameters
        ----------
        node : MarkdownDocument
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_blockquote(self, node: Blockquote) -> Any:
        """Visit a Blockquote node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HtmlBlock) -> Any:
        """Visit an HtmlBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong_emphasis(self, node: StrongEmphasis) -> Any:
        """Visit a StrongEmphasis node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HtmlInline) -> Any:
        """Visit an HtmlInline node."""
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        pass

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        pass


class ValidationVisitor(NodeVisitor):
    """Visitor that validates tree structure.

    The parser only produces valid trees, but trees can also be assembled
    by hand or loaded from JSON. This visitor re-checks the model's
    invariants on any tree:

    - Heading levels are between 1 and 6
    - Lists are non-empty, hold only ListItem nodes and carry a list type
    - Headings, paragraphs and inline containers hold only inline nodes
    - Documents, blockquotes and list items hold only block nodes
    - Text payloads (content, URLs, titles, info strings, metadata) are strings
    - Raw HTML nodes are present only when allowed

    Parameters
    ----------
    strict : bool, default = True
        Raise ValidationError on the first failure. When False, failures are
        collected in ``errors`` and traversal continues.
    allow_raw_html : bool, default = True
        Whether HtmlBlock and HtmlInline nodes are accepted

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> document.accept(validator)
        >>> validator.errors
        []

    """

    def __init__(self, strict: bool = True, allow_raw_html: bool = True):
        """Initialize the validator with strictness and HTML policy."""
        self.strict = strict
        self.allow_raw_html = allow_raw_html
        self.errors: list[str] = []

    def _add_error(self, message: str) -> None:
        self.errors.append(message)
        if self.strict:
            raise ValidationError(message)

    def _check_string(self, value: Any, description: str, optional: bool = False) -> None:
        if value is None and optional:
            return
        if not isinstance(value, str):
            self._add_error(f"{description} must be a string, got {type(value).__name__}")

    def _visit_inline_children(self, children: Iterable[Node], context: str) -> None:
        for i, child in enumerate(children):
            if not isinstance(child, InlineElement):
                self._add_error(f"{context} can only contain inline nodes, but child {i} is {type(child).__name__}")
                continue
            child.accept(self)

    def _visit_block_children(self, children: Iterable[Node], context: str) -> None:
        for i, child in enumerate(children):
            if not isinstance(child, BlockElement):
                self._add_error(f"{context} can only contain block nodes, but child {i} is {type(child).__name__}")
                continue
            child.accept(self)

    def visit_markdown_document(self, node: MarkdownDocument) -> None:
        """Validate the document root."""
        for key, value in node.metadata.items():
            self._check_string(key, "MarkdownDocument metadata key")
            self._check_string(value, f"MarkdownDocument metadata value for {key!r}")
        self._visit_block_children(node.blocks, "MarkdownDocument")

    def visit_heading(self, node: Heading) -> None:
        """Validate a Heading node."""
        level = node.level
        if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= MAX_HEADING_LEVEL:
            self._add_error(f"Invalid heading level: {level}")
        self._visit_inline_children(node.content, "Heading")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Validate a Paragraph node."""
        self._visit_inline_children(node.content, "Paragraph")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Validate a CodeBlock node."""
        self._check_string(node.content, "CodeBlock content")
        self._check_string(node.info, "CodeBlock info", optional=True)
        if node.info is not None and not node.info:
            self._add_error("CodeBlock info string must be None rather than empty")

    def visit_list(self, node: List) -> None:
        """Validate a List node."""
        if not node.items:
            self._add_error("List must have at least one item")
        if not isinstance(node.list_type, (UnorderedListType, OrderedListType)):
            self._add_error(f"List has invalid list type: {type(node.list_type).__name__}")
        elif isinstance(node.list_type, OrderedListType) and (
            not isinstance(node.list_type.start_number, int) or isinstance(node.list_type.start_number, bool)
        ):
            self._add_error(f"Ordered list start number must be an integer, got {node.list_type.start_number!r}")
        for i, item in enumerate(node.items):
            if not isinstance(item, ListItem):
                self._add_error(f"List can only contain ListItem nodes, but item {i} is {type(item).__name__}")
                continue
            item.accept(self)

    def visit_list_item(self, node: ListItem) -> None:
        """Validate a ListItem node."""
        if not isinstance(node.tight, bool):
            self._add_error(f"ListItem tight flag must be a boolean, got {type(node.tight).__name__}")
        self._visit_block_children(node.content, "ListItem")

    def visit_blockquote(self, node: Blockquote) -> None:
        """Validate a Blockquote node."""
        self._visit_block_children(node.content, "Blockquote")

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Validate a HorizontalRule node."""
        pass

    def visit_html_block(self, node: HtmlBlock) -> None:
        """Validate an HtmlBlock node."""
        self._check_string(node.content, "HtmlBlock content")
        if not self.allow_raw_html:
            self._add_error("Raw HTML content (HtmlBlock) is not allowed")

    def visit_text(self, node: Text) -> None:
        """Validate a Text node."""
        self._check_string(node.content, "Text content")

    def visit_emphasis(self, node: Emphasis) -> None:
        """Validate an Emphasis node."""
        self._visit_inline_children(node.content, "Emphasis")

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        """Validate a StrongEmphasis node."""
        self._visit_inline_children(node.content, "StrongEmphasis")

    def visit_code(self, node: Code) -> None:
        """Validate a Code node."""
        self._check_string(node.content, "Code content")

    def visit_link(self, node: Link) -> None:
        """Validate a Link node."""
        self._check_string(node.url, "Link url")
        self._check_string(node.title, "Link title", optional=True)
        self._visit_inline_children(node.text, "Link")

    def visit_image(self, node: Image) -> None:
        """Validate an Image node."""
        self._check_string(node.url, "Image url")
        self._check_string(node.title, "Image title", optional=True)
        self._visit_inline_children(node.alt, "Image")

    def visit_html_inline(self, node: HtmlInline) -> None:
        """Validate an HtmlInline node."""
        self._check_string(node.content, "HtmlInline content")
        if not self.allow_raw_html:
            self._add_error("Raw HTML content (HtmlInline) is not allowed")

    def visit_soft_break(self, node: SoftBreak) -> None:
        """Validate a SoftBreak node."""
        pass

    def visit_hard_break(self, node: HardBreak) -> None:
        """Validate a HardBreak node."""
        pass
