#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/utils.py
"""Utility functions for working with parsed trees.

Functions
---------
iter_nodes : Walk a tree in document order without recursion
extract_text : Concatenate the textual payload of a node or nodes
max_blockquote_depth : Deepest blockquote nesting in a tree

Examples
--------
Extract text from a heading:

    >>> from mdtree.ast import Emphasis, Heading, Text
    >>> from mdtree.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[Text("Hello "), Emphasis([Text("world")])])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from mdtree.ast.nodes import Blockquote, Code, HardBreak, Node, SoftBreak, Text, get_node_children


def iter_nodes(node_or_nodes: Union[Node, Iterable[Node]]) -> Iterator[Node]:
    """Yield every node of a tree in pre-order (document order).

    The walk uses an explicit stack, so it handles trees of any depth,
    including deeply nested blockquotes.

    Parameters
    ----------
    node_or_nodes : Node or iterable of Node
        Root node, or a sequence of sibling roots

    Yields
    ------
    Node
        Each node, parents before their children

    """
    roots = [node_or_nodes] if isinstance(node_or_nodes, Node) else list(node_or_nodes)
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_node_children(node)))


def extract_text(node_or_nodes: Union[Node, Iterable[Node]], joiner: str = "") -> str:
    r"""Extract plain text from a node or sequence of nodes.

    ``Text`` and ``Code`` contribute their content; soft and hard breaks
    contribute a newline. Other nodes contribute only through their
    children.

    Parameters
    ----------
    node_or_nodes : Node or iterable of Node
        A single node or sequence of nodes to extract text from
    joiner : str, default = ""
        String placed between the collected parts

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
    >>> extract_text(Paragraph([Text("a"), SoftBreak(), Code("b")]))
    'a\nb'

    """
    parts: list[str] = []
    for node in iter_nodes(node_or_nodes):
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, (SoftBreak, HardBreak)):
            parts.append("\n")
    return joiner.join(parts)


def max_blockquote_depth(node: Node) -> int:
    """Return the deepest blockquote nesting in a tree (0 if none)."""
    deepest = 0
    stack: list[tuple[Node, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Blockquote):
            depth += 1
            deepest = max(deepest, depth)
        stack.extend((child, depth) for child in get_node_children(current))
    return deepest


__all__ = ["iter_nodes", "extract_text", "max_blockquote_depth"]
