#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/serialization.py
"""JSON serialization and deserialization for parsed trees.

Every node maps to a dictionary with a ``node_type`` key naming its class
plus one key per field. Child sequences become lists. ``ListType`` values
are tagged with ``kind``. Optional fields (``info``, ``title``) are emitted
only when set.

Round-trip property: for any tree ``t`` produced by the parser,
``json_to_ast(ast_to_json(t)) == t``.

Examples
--------
Serialize a tree to JSON:

    >>> from mdtree import parse
    >>> from mdtree.ast.serialization import ast_to_json
    >>> print(ast_to_json(parse("# Title")))

Deserialize JSON back to a tree:

    >>> from mdtree.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.blocks[0].level
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

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
    ListType,
    MarkdownDocument,
    Node,
    OrderedListType,
    Paragraph,
    SoftBreak,
    StrongEmphasis,
    Text,
    UnorderedListType,
)
from mdtree.ast.visitors import ValidationVisitor
from mdtree.constants import AST_SCHEMA_VERSION
from mdtree.exceptions import ValidationError
from mdtree.options import JsonOptions

logger = logging.getLogger(__name__)


def _serialize_list_type(list_type: ListType) -> dict[str, Any]:
    if isinstance(list_type, OrderedListType):
        return {"kind": "ordered", "start_number": list_type.start_number, "delimiter": list_type.delimiter}
    return {"kind": "unordered", "marker": list_type.marker}


def _serialize_children(nodes: tuple[Node, ...]) -> list[dict[str, Any]]:
    return [ast_to_dict(child) for child in nodes]


def _serialize_content_node(node: Any, node_type: str) -> dict[str, Any]:
    """Serialize nodes whose ``content`` is a tuple of child nodes."""
    return {"node_type": node_type, "content": _serialize_children(node.content)}


def _serialize_text_content_node(node: Any, node_type: str) -> dict[str, Any]:
    """Serialize nodes whose ``content`` is a string."""
    return {"node_type": node_type, "content": node.content}


def _serialize_document(node: MarkdownDocument) -> dict[str, Any]:
    return {"node_type": "MarkdownDocument", "blocks": _serialize_children(node.blocks), "metadata": dict(node.metadata)}


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {"node_type": "Heading", "level": node.level, "content": _serialize_children(node.content)}


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "CodeBlock", "content": node.content}
    if node.info is not None:
        result["info"] = node.info
    return result


def _serialize_list(node: List) -> dict[str, Any]:
    return {
        "node_type": "List",
        "list_type": _serialize_list_type(node.list_type),
        "items": _serialize_children(node.items),
    }


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    return {"node_type": "ListItem", "content": _serialize_children(node.content), "tight": node.tight}


def _serialize_link(node: Link) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Link", "url": node.url, "text": _serialize_children(node.text)}
    if node.title is not None:
        result["title"] = node.title
    return result


def _serialize_image(node: Image) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Image", "url": node.url, "alt": _serialize_children(node.alt)}
    if node.title is not None:
        result["title"] = node.title
    return result


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    MarkdownDocument: _serialize_document,
    Heading: _serialize_heading,
    Paragraph: lambda n: _serialize_content_node(n, "Paragraph"),
    CodeBlock: _serialize_code_block,
    List: _serialize_list,
    ListItem: _serialize_list_item,
    Blockquote: lambda n: _serialize_content_node(n, "Blockquote"),
    HorizontalRule: lambda n: {"node_type": "HorizontalRule"},
    HtmlBlock: lambda n: _serialize_text_content_node(n, "HtmlBlock"),
    Text: lambda n: _serialize_text_content_node(n, "Text"),
    Emphasis: lambda n: _serialize_content_node(n, "Emphasis"),
    StrongEmphasis: lambda n: _serialize_content_node(n, "StrongEmphasis"),
    Code: lambda n: _serialize_text_content_node(n, "Code"),
    Link: _serialize_link,
    Image: _serialize_image,
    HtmlInline: lambda n: _serialize_text_content_node(n, "HtmlInline"),
    SoftBreak: lambda n: {"node_type": "SoftBreak"},
    HardBreak: lambda n: {"node_type": "HardBreak"},
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValidationError
        If the node type is not part of the document model

    Examples
    --------
    >>> ast_to_dict(Text("Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise ValidationError(
            f"Unknown node type for serialization: {type(node).__name__}",
            parameter_name="node",
            parameter_value=node,
        )
    return serializer(node)


def _require(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValidationError(
            f"{data.get('node_type', 'Node')} is missing required field '{key}'",
            parameter_name=key,
        ) from None


def _deserialize_children(data: dict[str, Any], key: str) -> list[Any]:
    children = data.get(key, [])
    if not isinstance(children, list):
        raise ValidationError(f"Field '{key}' must be a list, got {type(children).__name__}", parameter_name=key)
    return [_dict_to_node(child) for child in children]


def _deserialize_list_type(data: Any) -> ListType:
    if not isinstance(data, dict):
        raise ValidationError("List is missing a valid 'list_type' object", parameter_name="list_type")
    kind = data.get("kind")
    if kind == "ordered":
        return OrderedListType(start_number=data.get("start_number", 1), delimiter=data.get("delimiter", "."))
    if kind == "unordered":
        return UnorderedListType(marker=_require(data, "marker"))
    raise ValidationError(f"Unknown list type kind: {kind!r}", parameter_name="list_type", parameter_value=kind)


def _deserialize_document(data: dict[str, Any]) -> MarkdownDocument:
    return MarkdownDocument(blocks=_deserialize_children(data, "blocks"), metadata=dict(data.get("metadata", {})))


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    return Heading(level=_require(data, "level"), content=_deserialize_children(data, "content"))


def _deserialize_code_block(data: dict[str, Any]) -> CodeBlock:
    return CodeBlock(content=_require(data, "content"), info=data.get("info"))


def _deserialize_list(data: dict[str, Any]) -> List:
    return List(items=_deserialize_children(data, "items"), list_type=_deserialize_list_type(data.get("list_type")))


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    return ListItem(content=_deserialize_children(data, "content"), tight=data.get("tight", True))


def _deserialize_link(data: dict[str, Any]) -> Link:
    return Link(text=_deserialize_children(data, "text"), url=_require(data, "url"), title=data.get("title"))


def _deserialize_image(data: dict[str, Any]) -> Image:
    return Image(alt=_deserialize_children(data, "alt"), url=_require(data, "url"), title=data.get("title"))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    "MarkdownDocument": _deserialize_document,
    "Heading": _deserialize_heading,
    "Paragraph": lambda d: Paragraph(content=_deserialize_children(d, "content")),
    "CodeBlock": _deserialize_code_block,
    "List": _deserialize_list,
    "ListItem": _deserialize_list_item,
    "Blockquote": lambda d: Blockquote(content=_deserialize_children(d, "content")),
    "HorizontalRule": lambda d: HorizontalRule(),
    "HtmlBlock": lambda d: HtmlBlock(content=_require(d, "content")),
    "Text": lambda d: Text(content=_require(d, "content")),
    "Emphasis": lambda d: Emphasis(content=_deserialize_children(d, "content")),
    "StrongEmphasis": lambda d: StrongEmphasis(content=_deserialize_children(d, "content")),
    "Code": lambda d: Code(content=_require(d, "content")),
    "Link": _deserialize_link,
    "Image": _deserialize_image,
    "HtmlInline": lambda d: HtmlInline(content=_require(d, "content")),
    "SoftBreak": lambda d: SoftBreak(),
    "HardBreak": lambda d: HardBreak(),
}


def _dict_to_node(data: dict[str, Any]) -> Node:
    if not isinstance(data, dict):
        raise ValidationError(f"Expected a node dictionary, got {type(data).__name__}")

    node_type = data.get("node_type")
    if not node_type:
        raise ValidationError("Dictionary must contain 'node_type' field", parameter_name="node_type")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        raise ValidationError(f"Unknown node type: {node_type}", parameter_name="node_type", parameter_value=node_type)

    try:
        return deserializer(data)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {node_type} node: {e}", original_error=e) from e


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to a node.

    The rebuilt tree is checked with a strict ``ValidationVisitor``, so
    misplaced children (a block inside a paragraph, an inline node at
    document level) and non-string text payloads are rejected.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValidationError
        If the dictionary has no or an unknown ``node_type``, lacks a
        required field, or describes a node that violates the model's
        invariants (for example a heading of level 7)

    """
    node = _dict_to_node(data)
    node.accept(ValidationVisitor(strict=True))
    return node


def ast_to_json(node: Node, options: Optional[JsonOptions] = None) -> str:
    """Serialize a node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The node to serialize, usually a MarkdownDocument
    options : JsonOptions or None, default = None
        Formatting options; defaults to ``JsonOptions()``

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "node_type": ...}``

    """
    options = options or JsonOptions()
    versioned = {"schema_version": AST_SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(
        versioned,
        indent=options.indent,
        ensure_ascii=options.ensure_ascii,
        sort_keys=options.sort_keys,
    )


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string produced by ``ast_to_json``.

    JSON without a ``schema_version`` is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValidationError
        If the JSON is malformed, has an unsupported schema version, or
        describes an invalid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Malformed JSON: {e}", original_error=e) from e

    if not isinstance(data, dict):
        raise ValidationError(f"Expected a JSON object at the root, got {type(data).__name__}")

    schema_version = data.pop("schema_version", AST_SCHEMA_VERSION)
    if schema_version != AST_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported schema version: {schema_version}. Supported version is {AST_SCHEMA_VERSION}.",
            parameter_name="schema_version",
            parameter_value=schema_version,
        )

    logger.debug("Deserializing %s tree from JSON", data.get("node_type"))
    return dict_to_ast(data)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
