"""Syntax tree provider for Rust smart-contract sources.

The analysis walkers never lex or parse text themselves. They consume a
``SyntaxTree`` produced by a ``SyntaxProvider``. The default provider,
``RustSyntaxProvider``, is backed by tree-sitter and its Rust grammar.

Submodules
----------
- ``provider``: SyntaxTree, SyntaxProvider, RustSyntaxProvider, parse_source.
- ``nodes``: Small helpers for reading text and lines off nodes, and pre-order walks.
"""

from sanctifier.syntax.nodes import iter_preorder, node_line, node_text
from sanctifier.syntax.provider import (
    RustSyntaxProvider,
    SyntaxProvider,
    SyntaxTree,
    parse_source,
)

__all__ = [
    "RustSyntaxProvider",
    "SyntaxProvider",
    "SyntaxTree",
    "iter_preorder",
    "node_line",
    "node_text",
    "parse_source",
]
