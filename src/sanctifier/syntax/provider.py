"""Parse Rust source text into a tree-sitter syntax tree.

tree-sitter is error-tolerant: it always returns a tree and marks the
regions it could not understand with ``ERROR`` or missing nodes. The
analyzers need an all-or-nothing contract instead, so any tree that
contains an error is rejected with ``ParseError`` and the caller returns
an empty result rather than analyzing a partial tree.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser

from sanctifier.exceptions import ParseError

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tsrust.language())


@dataclass(frozen=True)
class SyntaxTree:
    """A parsed compilation unit.

    Attributes:
        root: The ``source_file`` node at the top of the tree.
        source: The UTF-8 bytes the tree was parsed from. Node byte
            offsets index into this buffer.
    """

    root: Node
    source: bytes


class SyntaxProvider(ABC):
    """Turns raw source text into a ``SyntaxTree``."""

    @abstractmethod
    def parse(self, source: str) -> SyntaxTree:
        """Parse one compilation unit.

        Args:
            source: The complete text of a single source file.

        Returns:
            The parsed tree.

        Raises:
            ParseError: If the text is not syntactically valid.
        """


class RustSyntaxProvider(SyntaxProvider):
    """tree-sitter backed provider for Rust.

    A fresh ``Parser`` is created for every call; parsers carry mutable
    state and must not be shared between threads.
    """

    def parse(self, source: str) -> SyntaxTree:
        try:
            data = source.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ParseError(f"source is not encodable as UTF-8: {exc}") from exc

        tree = Parser(RUST_LANGUAGE).parse(data)
        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root)
            logger.debug("Rust parse error near line %s", line)
            raise ParseError(f"syntax error near line {line}")
        return SyntaxTree(root=root, source=data)


def _first_error_line(root: Node) -> int:
    """Return the 1-based line of the first ERROR or missing node."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed([c for c in node.children if c.has_error]))
    return root.start_point[0] + 1


_default_provider = RustSyntaxProvider()


def parse_source(source: str) -> SyntaxTree:
    """Parse Rust source text with the default provider.

    Raises:
        ParseError: If the text is not syntactically valid.
    """
    return _default_provider.parse(source)
