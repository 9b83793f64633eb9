"""
Tree printer.

Renders a parsed forest for humans: as indented plain text, or as a rich
Tree for terminals. Neither form is meant to be parsed back.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape
from rich.tree import Tree

from .config import PrinterConfig, get_config
from .dom import Node


def _printer_config(config: PrinterConfig | None) -> PrinterConfig:
    return config if config is not None else get_config().printer


def _truncate(content: str, limit: int) -> str:
    if limit <= 0 or len(content) <= limit:
        return content
    if limit <= 3:
        return content[:limit]
    return content[:limit - 3] + "..."


def format_node(node: Node, depth: int = 0, config: PrinterConfig | None = None) -> str:
    """
    One-line summary of a node, indented for its depth.

    Example: `    [link url="x"] "Click" @49`
    """
    cfg = _printer_config(config)

    head = node.tag
    if cfg.show_attributes and node.attributes:
        attrs = " ".join(f'{key}="{value}"' for key, value in sorted(node.attributes.items()))
        head = f"{head} {attrs}"

    parts = [f"[{head}]"]
    if node.content:
        # repr keeps embedded newlines on one line
        parts.append(repr(_truncate(node.content, cfg.max_content)))
    if cfg.show_offsets:
        parts.append(f"@{node.end_offset}")

    return " " * (cfg.indent * depth) + " ".join(parts)


def format_forest(forest: Iterable[Node], config: PrinterConfig | None = None) -> str:
    """Plain indented tree, one node per line, depth-first."""
    cfg = _printer_config(config)
    lines: list[str] = []

    # Explicit stack of (node, depth) so deep trees don't recurse
    stack: list[tuple[Node, int]] = [(root, 0) for root in reversed(list(forest))]
    while stack:
        node, depth = stack.pop()
        lines.append(format_node(node, depth, cfg))
        stack.extend((child, depth + 1) for child in reversed(node.children))

    return "\n".join(lines)


def build_tree(forest: Iterable[Node], config: PrinterConfig | None = None, label: str = "document") -> Tree:
    """Same structure as format_forest, as a rich renderable."""
    cfg = _printer_config(config)
    flat = PrinterConfig(
        indent=0,
        show_offsets=cfg.show_offsets,
        show_attributes=cfg.show_attributes,
        max_content=cfg.max_content,
    )

    tree = Tree(escape(label))
    stack: list[tuple[Node, Tree]] = [(root, tree) for root in reversed(list(forest))]
    while stack:
        node, parent = stack.pop()
        branch = parent.add(escape(format_node(node, 0, flat)))
        stack.extend((child, branch) for child in reversed(node.children))

    return tree
