"""
CLI interface for bracketdom.

Parses a bracket markup file (or stdin) and prints the resulting tree.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import replace

from rich.console import Console

from .config import get_config
from .dom import count_nodes
from .errors import MarkupSyntaxError
from .parser import parse
from .printer import build_tree, format_forest
from .scanner import sanitize

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="bracketdom",
        description="Parse [tag attr=\"value\"]...[/tag] markup and print its tree",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (reads from stdin if not provided)",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print an indented plain-text tree instead of a rich tree",
    )

    parser.add_argument(
        "--no-offsets",
        action="store_false",
        dest="show_offsets",
        default=None,
        help="Hide end offsets",
    )

    parser.add_argument(
        "--no-attributes",
        action="store_false",
        dest="show_attributes",
        default=None,
        help="Hide attributes",
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="Spaces per nesting level in --plain output",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        help="Reject documents nested deeper than this (0 = unlimited)",
    )

    parser.add_argument(
        "--count",
        "-c",
        action="store_true",
        help="Only print the number of nodes",
    )

    parser.add_argument(
        "--time",
        "-t",
        action="store_true",
        dest="timing",
        help="Report parse time on stderr",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def read_input(filepath: str | None) -> str:
    """Read from file or stdin."""
    if filepath:
        with open(filepath, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = get_config()
    printer_cfg = replace(cfg.printer)
    if parsed.show_offsets is not None:
        printer_cfg.show_offsets = parsed.show_offsets
    if parsed.show_attributes is not None:
        printer_cfg.show_attributes = parsed.show_attributes
    if parsed.indent is not None:
        if parsed.indent < 0:
            print(f"Error: Indent must be >= 0, got {parsed.indent}", file=sys.stderr)
            return 1
        printer_cfg.indent = parsed.indent

    max_depth = parsed.max_depth if parsed.max_depth is not None else cfg.parser.max_depth
    if max_depth < 0:
        print(f"Error: Max depth must be >= 0, got {max_depth}", file=sys.stderr)
        return 1

    # Read content
    try:
        content = read_input(parsed.file)
    except FileNotFoundError:
        print(f"Error: File not found: {parsed.file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    started = time.perf_counter()
    try:
        forest = parse(content, max_depth=max_depth)
    except MarkupSyntaxError as e:
        print(f"Error: {e}", file=sys.stderr)
        excerpt = e.excerpt(sanitize(content))
        if excerpt:
            print(excerpt, file=sys.stderr)
        return 1
    elapsed_ms = (time.perf_counter() - started) * 1000

    if parsed.timing:
        print(f"Parsed in {elapsed_ms:.2f} ms", file=sys.stderr)
    logger.debug("Parse of %s took %.2f ms", parsed.file or "<stdin>", elapsed_ms)

    if parsed.count:
        print(count_nodes(forest))
        return 0

    if not forest:
        return 0

    if parsed.plain:
        print(format_forest(forest, printer_cfg))
    else:
        Console().print(build_tree(forest, printer_cfg, label=parsed.file or "<stdin>"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
