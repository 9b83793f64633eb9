"""
UAT: Large and deeply nested documents.

Validates that wide and deep documents parse without blowing the call stack
and that every end offset lands where the offset formula says it should.
"""

import sys

import pytest

from bracketdom.dom import Element, Node, count_nodes
from bracketdom.parser import parse


def test_thousand_siblings():
    """1,000 [item] children under one root."""
    text = "[root]" + " [item]Test[/item]" * 1000 + "[/root]"
    (root,) = parse(text)

    assert len(root.children) == 1000
    assert all(item.content == "Test" for item in root.children)
    # [root] is 6 chars, each " [item]Test[/item]" is 18
    assert [item.end_offset for item in root.children] == [6 + 18 * (i + 1) for i in range(1000)]
    assert root.end_offset == 18013 == len(text)


def test_thousand_siblings_structural_equality():
    text = "[root]" + " [item]Test[/item]" * 1000 + "[/root]"
    items = tuple(Node(Element("item", "Test"), 6 + 18 * (i + 1)) for i in range(1000))
    assert parse(text) == (Node(Element("root", ""), 18013, items),)


def test_hundred_by_hundred():
    """100 items, each with 100 subs: 10,101 nodes."""
    text = "[root]" + (" [item]" + " [sub]X[/sub]" * 100 + "[/item]") * 100 + "[/root]"
    forest = parse(text)
    (root,) = forest

    assert count_nodes(forest) == 10_101
    item_len = len(" [item]" + " [sub]X[/sub]" * 100 + "[/item]")
    for i, item in enumerate(root.children):
        item_start = 6 + item_len * i
        assert item.end_offset == item_start + item_len
        # " [item]" is 7 chars, each " [sub]X[/sub]" is 13
        assert [sub.end_offset for sub in item.children] == [
            item_start + 7 + 13 * (j + 1) for j in range(100)
        ]
    assert root.end_offset == len(text)


def test_nesting_deeper_than_recursion_limit():
    depth = sys.getrecursionlimit() * 5
    text = "[d]" * depth + "x" + "[/d]" * depth
    (node,) = parse(text)

    assert node.end_offset == len(text)
    levels = 1
    while node.children:
        (child,) = node.children
        assert child.end_offset < node.end_offset
        node = child
        levels += 1
    assert levels == depth
    assert node.content == "x"

    assert parse(text) == parse(text)
    assert parse(text) != parse(text.replace("x", "y"))
    assert "children=<1>" in repr(parse(text)[0])


@pytest.mark.slow
def test_million_nodes():
    """1 root, 1,000 parents, 1,000,000 children."""
    child = " [child]X[/child]"
    parent = " [parent]" + child * 1000 + "[/parent]"
    text = "[root]" + parent * 1000 + "[/root]"
    (root,) = parse(text)

    assert len(root.children) == 1000
    assert all(len(p.children) == 1000 for p in root.children)
    assert count_nodes((root,)) == 1_001_001

    parent_len = len(parent)
    last = root.children[-1]
    last_start = 6 + parent_len * 999
    assert last.end_offset == last_start + parent_len
    # " [parent]" is 9 chars, each " [child]X[/child]" is 17
    assert last.children[0].end_offset == last_start + 9 + 17
    assert root.end_offset == len(text)
