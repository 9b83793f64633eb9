"""
Attribute sub-parser.

Consumes the header of an opening tag (the text between the tag name and the
closing ']') and returns a key -> value mapping.

Grammar per pair, repeated until the header is exhausted:
    ws+ key ws* '=' ws* quote value quote

Keys are lower-cased; a repeated key overwrites the earlier value. Values are
taken verbatim between matching ' or " quotes (no escapes).
"""

from __future__ import annotations

from .errors import MarkupSyntaxError
from .scanner import check_name_char, skip_whitespace

QUOTES = ("'", '"')


def parse_attributes(header: str, base: int = 0) -> dict[str, str]:
    """
    Parse an attribute header into a dict.

    Args:
        header: Text between the tag name and ']', leading whitespace included
        base: Offset of header[0] in the document, used for error positions

    Raises:
        MarkupSyntaxError: on any malformed pair
    """
    attributes: dict[str, str] = {}
    end = len(header)
    pos = 0

    while pos < end:
        if not header[pos].isspace():
            raise MarkupSyntaxError("Whitespace expected between attributes", base + pos)

        pos = skip_whitespace(header, pos)

        key_start = pos
        while pos < end and header[pos] != "=" and not header[pos].isspace():
            check_name_char(header[pos], base + pos)
            pos += 1
        key = header[key_start:pos]
        if not key:
            raise MarkupSyntaxError("Attribute name expected", base + pos)

        pos = skip_whitespace(header, pos)
        if pos >= end or header[pos] != "=":
            raise MarkupSyntaxError(f"Assignment '=' expected after attribute {key!r}", base + pos)

        pos = skip_whitespace(header, pos + 1)
        if pos >= end or header[pos] not in QUOTES:
            raise MarkupSyntaxError(f"Quotation mark expected for attribute {key!r}", base + pos)

        quote = header[pos]
        close = header.find(quote, pos + 1)
        if close == -1:
            raise MarkupSyntaxError(f"Unclosed quotation mark in attribute {key!r}", base + pos)

        attributes[key.lower()] = header[pos + 1:close]
        pos = close + 1

    return attributes
