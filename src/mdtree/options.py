#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/options.py
"""Configuration options for tree output.

Parsing itself takes no options. The dataclasses here configure the surfaces
that consume a parsed tree: JSON serialization and the outline dump printed
by the command-line interface.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdtree.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_OUTLINE_INDENT_WIDTH,
    DEFAULT_OUTLINE_MAX_TEXT_LENGTH,
)
from mdtree.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class JsonOptions(CloneFrozenMixin):
    """Configuration options for JSON serialization of a parsed tree.

    Parameters
    ----------
    indent : int or None, default 2
        Spaces per indentation level; None produces compact single-line JSON.
    ensure_ascii : bool, default False
        Escape non-ASCII characters instead of emitting them verbatim.
    sort_keys : bool, default False
        Sort object keys in the output.

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "Spaces per JSON indentation level (omit for compact output)", "type": int},
    )
    ensure_ascii: bool = field(
        default=False,
        metadata={"help": "Escape non-ASCII characters in JSON output", "cli_name": "ascii"},
    )
    sort_keys: bool = field(
        default=False,
        metadata={"help": "Sort JSON object keys"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation width.

        Raises
        ------
        ValidationError
            If ``indent`` is negative.

        """
        if self.indent is not None and self.indent < 0:
            raise ValidationError(
                f"indent must be None or non-negative, got {self.indent}",
                parameter_name="indent",
                parameter_value=self.indent,
            )


@dataclass(frozen=True)
class OutlineOptions(CloneFrozenMixin):
    """Configuration options for the indented outline dump.

    Parameters
    ----------
    indent_width : int, default 2
        Spaces added per nesting level.
    show_text : bool, default True
        Whether leaf nodes print their text payload.
    max_text_length : int, default 60
        Longer payloads are shortened and suffixed with ``...``.

    """

    indent_width: int = field(
        default=DEFAULT_OUTLINE_INDENT_WIDTH,
        metadata={"help": "Spaces per outline nesting level", "type": int},
    )
    show_text: bool = field(
        default=True,
        metadata={"help": "Print text payloads of leaf nodes", "cli_name": "no-text"},
    )
    max_text_length: int = field(
        default=DEFAULT_OUTLINE_MAX_TEXT_LENGTH,
        metadata={"help": "Truncate leaf payloads longer than this", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        if self.indent_width < 1:
            raise ValidationError(
                f"indent_width must be at least 1, got {self.indent_width}",
                parameter_name="indent_width",
                parameter_value=self.indent_width,
            )
        if self.max_text_length < 4:
            raise ValidationError(
                f"max_text_length must be at least 4, got {self.max_text_length}",
                parameter_name="max_text_length",
                parameter_value=self.max_text_length,
            )


__all__ = ["CloneFrozenMixin", "JsonOptions", "OutlineOptions"]
