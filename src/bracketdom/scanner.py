"""
Cursor helpers shared by the node parser and the attribute sub-parser.

Both parsers walk a string by integer offset; these functions hold the small
character-class rules they must agree on.
"""

from __future__ import annotations

from .errors import MarkupSyntaxError


def sanitize(text: str) -> str:
    """Trim leading/trailing whitespace. All offsets refer to the result."""
    return text.strip()


def skip_whitespace(text: str, offset: int) -> int:
    """Index of the first non-whitespace char at or after offset (or len)."""
    end = len(text)
    while offset < end and text[offset].isspace():
        offset += 1
    return offset


def is_name_char(ch: str) -> bool:
    """Tag and attribute names: letters, decimal digits, '-' and '_'."""
    return ch.isalpha() or ch.isdecimal() or ch == "-" or ch == "_"


def check_name_char(ch: str, position: int) -> None:
    if not is_name_char(ch):
        raise MarkupSyntaxError(f"Invalid character: {ch!r}", position)
