"""
DOM - Document Object Model for bracketdom

Every parse produces a forest of Nodes. A Node wraps an Element (tag, trimmed
direct content, attributes) together with the offset just past its closing
tag and its children.

Key invariant: end_offset indexes the sanitized (stripped) input, so
text[node.close_start:node.end_offset] is always the node's own "[/tag]".
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Shared by every attribute-less element; large trees are mostly these
_NO_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Element:
    """Tag name, trimmed direct text and attributes of one tag."""
    tag: str
    content: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze a private copy so callers can't mutate a parsed tree
        frozen = MappingProxyType(dict(self.attributes)) if self.attributes else _NO_ATTRIBUTES
        object.__setattr__(self, "attributes", frozen)

    def __hash__(self) -> int:
        return hash((self.tag, self.content, frozenset(self.attributes.items())))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Node:
    """
    A parsed element with its end offset and children.

    Equality is structural over the whole subtree but compares pairs from an
    explicit stack, so trees deeper than the recursion limit compare fine.
    The hash only covers this node's element, offset and child count, which
    keeps it consistent with equality without walking the subtree.
    """
    element: Element
    end_offset: int
    children: tuple[Node, ...] = ()

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        pairs: list[tuple[Node, Node]] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is b:
                continue
            if (
                a.end_offset != b.end_offset
                or len(a.children) != len(b.children)
                or a.element != b.element
            ):
                return False
            pairs.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        return hash((self.element, self.end_offset, len(self.children)))

    def __repr__(self) -> str:
        # Shallow: children are summarized by count
        return f"Node(element={self.element!r}, end_offset={self.end_offset}, children=<{len(self.children)}>)"

    @property
    def tag(self) -> str:
        return self.element.tag

    @property
    def content(self) -> str:
        return self.element.content

    @property
    def attributes(self) -> Mapping[str, str]:
        return self.element.attributes

    @property
    def close_start(self) -> int:
        """Offset of the '[' that opens this node's closing tag."""
        return self.end_offset - len(self.element.tag) - 3

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def breadth_first(self) -> Iterator[Node]:
        """Traverse tree breadth-first."""
        queue: deque[Node] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)


def iter_forest(forest: Iterable[Node]) -> Iterator[Node]:
    """Depth-first over every root in document order."""
    for root in forest:
        yield from root.depth_first()


def find_all(forest: Iterable[Node], tag: str) -> list[Node]:
    """All nodes whose tag equals `tag` exactly, in document order."""
    return [node for node in iter_forest(forest) if node.tag == tag]


def count_nodes(forest: Iterable[Node]) -> int:
    """Total number of nodes in the forest."""
    return sum(1 for _ in iter_forest(forest))
