#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants for the mdtree parser.

This module centralizes the fixed values that drive parsing. None of them is
configurable at runtime: the parser is a pure function of its input text.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Preprocessing - Tab expansion and line splitting
3. Block Syntax - Markers recognized at the start of a line
4. Inline Syntax - Escapes, entities and delimiters
5. Serialization and CLI - Output defaults and exit codes
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UnorderedMarker = Literal["-", "*", "+"]
OrderedDelimiter = Literal[".", ")"]
OutputFormat = Literal["json", "outline"]

# =============================================================================
# Preprocessing
# =============================================================================

# Tabs expand to the next multiple of this column width
TAB_WIDTH = 4

# Line terminators recognized when splitting input into logical lines
LINE_BREAK_PATTERN = re.compile(r"\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")

# =============================================================================
# Block Syntax
# =============================================================================

HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 6

BLOCKQUOTE_MARKER = ">"

# Fence strings that open a fenced code block; the closing line must start
# with the same fence
CODE_FENCES: tuple[str, ...] = ("```", "~~~")

HORIZONTAL_RULE_CHARS = frozenset("-*_")
MIN_HORIZONTAL_RULE_CHARS = 3

UNORDERED_LIST_MARKERS = frozenset("-*+")
ORDERED_LIST_DELIMITERS = frozenset(".)")
ORDERED_LIST_PATTERN = re.compile(r"^(\d+)([.)])\s")
DEFAULT_ORDERED_START = 1

# =============================================================================
# Inline Syntax
# =============================================================================

# Characters that a backslash turns into literal text
ESCAPABLE_CHARS = frozenset("\\`*_[]!#+-()")

# The terminating ';' of an entity reference must appear within this many
# characters of the opening '&'
ENTITY_MAX_LOOKAHEAD = 20

STRONG_DELIMITERS: tuple[str, ...] = ("**", "__")
EMPHASIS_DELIMITERS = frozenset("*_")

CODE_SPAN_DELIMITER = "`"

# Largest valid Unicode scalar and the surrogate block it must avoid
MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)

# =============================================================================
# Serialization and CLI
# =============================================================================

AST_SCHEMA_VERSION = 1

DEFAULT_JSON_INDENT = 2
DEFAULT_OUTLINE_INDENT_WIDTH = 2
DEFAULT_OUTLINE_MAX_TEXT_LENGTH = 60

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
