"""Abort-pattern detection for Rust contract sources.

Given a ``SyntaxTree``, ``collect_unsafe_patterns`` walks every node once in
pre-order and reports each call site that can abort contract execution:

- ``panic!(...)`` -- unconditional abort.
- ``.unwrap()`` -- aborts when the receiver is ``None`` / ``Err``.
- ``.expect(msg)`` -- the same, with a message.

Submodules
----------
- ``catalog``: Abort macro and fallible accessor tables.
- ``visitor``: The pre-order tree walk.
"""

from sanctifier.core.patterns.catalog import ABORT_MACROS, FALLIBLE_ACCESSORS
from sanctifier.core.patterns.visitor import collect_unsafe_patterns

__all__ = [
    "ABORT_MACROS",
    "FALLIBLE_ACCESSORS",
    "collect_unsafe_patterns",
]
