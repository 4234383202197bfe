#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/entities.py
"""HTML entity references recognized in inline text.

The named-entity table is a read-only mapping built once at import time and
shared by every parse, including concurrent ones.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Mapping, Optional

from mdtree.constants import MAX_CODE_POINT, SURROGATE_RANGE

HTML_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        # Core HTML entities
        "amp": "&",
        "lt": "<",
        "gt": ">",
        "quot": '"',
        "apos": "'",
        # Common named entities
        "nbsp": "\u00a0",
        "copy": "©",
        "reg": "®",
        "trade": "™",
        "mdash": "—",
        "ndash": "–",
        "hellip": "…",
        # Currency and typography
        "euro": "€",
        "pound": "£",
        "yen": "¥",
        "cent": "¢",
        "sect": "§",
        "para": "¶",
        "bull": "•",
        "deg": "°",
        # Math
        "plusmn": "±",
        "times": "×",
        "divide": "÷",
        "ne": "≠",
        "le": "≤",
        "ge": "≥",
        # Arrows
        "larr": "←",
        "rarr": "→",
        "uarr": "↑",
        "darr": "↓",
        "harr": "↔",
    }
)

_DECIMAL_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


def _code_point_to_char(code_point: int) -> Optional[str]:
    if code_point > MAX_CODE_POINT or code_point in SURROGATE_RANGE:
        return None
    return chr(code_point)


def decode_entity_reference(body: str) -> Optional[str]:
    """Decode the text between ``&`` and ``;`` of an entity reference.

    Parameters
    ----------
    body : str
        Entity name (``"copy"``), decimal form (``"#169"``) or hexadecimal
        form (``"#xA9"`` / ``"#XA9"``)

    Returns
    -------
    str or None
        The replacement text, or None when the reference is unknown or
        names an invalid code point

    Examples
    --------
    >>> decode_entity_reference("copy")
    '©'
    >>> decode_entity_reference("#x00A9")
    '©'
    >>> decode_entity_reference("bogus") is None
    True

    """
    if not body.startswith("#"):
        return HTML_ENTITIES.get(body)

    numeric = body[1:]
    if numeric[:1] in ("x", "X"):
        digits = numeric[1:]
        if not digits or not _HEX_DIGITS.issuperset(digits):
            return None
        return _code_point_to_char(int(digits, 16))

    if not numeric or not _DECIMAL_DIGITS.issuperset(numeric):
        return None
    return _code_point_to_char(int(numeric))


__all__ = ["HTML_ENTITIES", "decode_entity_reference"]
