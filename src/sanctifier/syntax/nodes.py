"""Helpers for reading tree-sitter nodes."""

from __future__ import annotations

from typing import Iterator

from tree_sitter import Node


def node_text(node: Node, source: bytes) -> str:
    """Return the source text covered by ``node``."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_line(node: Node) -> int:
    """Return the 1-based line on which ``node`` starts."""
    return node.start_point[0] + 1


def iter_preorder(root: Node) -> Iterator[Node]:
    """Yield every node reachable from ``root`` exactly once, in pre-order.

    Uses an explicit stack so deeply nested expressions cannot exhaust the
    recursion limit. Children are pushed in reverse so they pop in source
    order.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
