"""
Bracket markup parser.

Turns `[tag attr="value"]content[/tag]` markup into a forest of Nodes.

Implements:
- parse_node: one complete `[tag ...]...[/tag]` unit, children included
- parse: the whole document as a sequence of top-level units

Nesting is tracked with an explicit stack of open-tag frames instead of
recursion, so depth is bounded by memory (or by max_depth), not by Python's
call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .attributes import parse_attributes
from .config import get_config
from .dom import Element, Node, count_nodes
from .errors import MarkupSyntaxError
from .scanner import check_name_char, sanitize, skip_whitespace

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """An opening tag whose closing tag hasn't been reached yet."""
    name: str
    content: str
    attributes: dict[str, str]
    children: list[Node] = field(default_factory=list)


def _no_closing_tag(name: str, position: int) -> MarkupSyntaxError:
    return MarkupSyntaxError(f"There is no closing tag for the opening `{name}` tag", position)


def _open_tag(text: str, offset: int) -> tuple[_Frame, int]:
    """
    Consume an opening tag and the content text that follows it.

    Returns the new frame and the offset of the next '[' (or len(text)).
    """
    end = len(text)
    pos = skip_whitespace(text, offset)

    if pos >= end or text[pos] != "[":
        raise MarkupSyntaxError("The opening tag was expected", pos)
    tag_start = pos
    pos += 1

    if pos < end and text[pos] == "/":
        raise MarkupSyntaxError("An opening tag was expected, but a closing tag was encountered", tag_start)

    # Tag name runs until whitespace or ']'
    while pos < end and text[pos] != "]" and not text[pos].isspace():
        check_name_char(text[pos], pos)
        pos += 1
    name = text[tag_start + 1:pos]

    if pos >= end:
        raise MarkupSyntaxError(f"Unterminated opening tag `{name}`" if name else "Unterminated opening tag", tag_start)
    if not name:
        raise MarkupSyntaxError("Empty tag name", tag_start)

    attributes: dict[str, str] = {}
    if text[pos] != "]":
        header_end = text.find("]", pos)
        if header_end == -1:
            raise MarkupSyntaxError(f"Unterminated opening tag `{name}`", tag_start)
        attributes = parse_attributes(text[pos:header_end], base=pos)
        pos = header_end
    pos += 1

    content_end = text.find("[", pos)
    if content_end == -1:
        content_end = end

    return _Frame(name, text[pos:content_end].strip(), attributes), content_end


def _resolve_depth(max_depth: int | None) -> int:
    if max_depth is None:
        max_depth = get_config().parser.max_depth
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    return max_depth


def parse_node(text: str, offset: int = 0, *, max_depth: int | None = None) -> Node:
    """
    Parse one complete node starting at or after `offset`.

    Only whitespace may precede the node's opening '['. Children are parsed
    until the exact `[/name]` closing tag is found; a closing tag for any
    other name is an error, never skipped.

    Args:
        text: Sanitized markup; offsets in the result index into it
        offset: Where to start looking for the opening tag
        max_depth: Maximum nesting depth, 0 for unlimited, None for config

    Raises:
        MarkupSyntaxError: if no well-formed node starts at offset
    """
    limit = _resolve_depth(max_depth)

    frame, pos = _open_tag(text, offset)
    stack: list[_Frame] = [frame]

    while True:
        frame = stack[-1]

        # Candidate token: from pos through the next ']'
        start = pos
        close = text.find("]", start)
        if close == -1:
            raise _no_closing_tag(frame.name, start)
        token = text[start:close + 1]

        if token == f"[/{frame.name}]":
            node = Node(
                Element(frame.name, frame.content, frame.attributes),
                close + 1,
                tuple(frame.children),
            )
            stack.pop()
            if not stack:
                return node
            stack[-1].children.append(node)
            pos = skip_whitespace(text, close + 1)
            continue

        # Mismatched or out-of-order closing tag
        if token[1:2] == "/":
            raise _no_closing_tag(frame.name, start)

        if limit and len(stack) >= limit:
            raise MarkupSyntaxError(f"Nesting deeper than {limit} levels", start)

        child, pos = _open_tag(text, start)
        stack.append(child)


def parse(text: str, *, max_depth: int | None = None) -> tuple[Node, ...]:
    """
    Parse a markup document into a forest of root nodes.

    Leading/trailing whitespace is trimmed first; every end_offset in the
    result indexes the trimmed text. Blank input gives an empty forest.

    Raises:
        MarkupSyntaxError: on the first malformed construct; no partial
            result is returned
    """
    source = sanitize(text)
    if not source:
        return ()

    nodes: list[Node] = []
    pos = 0
    end = len(source)

    while pos < end:
        node = parse_node(source, pos, max_depth=max_depth)
        nodes.append(node)
        pos = node.end_offset

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %d root(s), %d node(s) from %d chars", len(nodes), count_nodes(nodes), end)

    return tuple(nodes)
