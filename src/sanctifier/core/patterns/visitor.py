"""Pre-order syntax tree walk that collects abort-prone call sites.

The result order is the pre-order position of each match, a pure function
of the tree. For a method chain ``a.unwrap().expect("m")`` the outer
``expect`` call is reported first.

Only two node kinds carry matches:

- ``macro_invocation``: ``panic!`` and friends. Macro token trees are
  opaque token streams and are not re-parsed.
- ``call_expression`` whose callee is a ``field_expression`` (optionally
  wrapped in a turbofish ``generic_function``): a method call.
"""

from __future__ import annotations

import logging
from typing import Callable

from tree_sitter import Node

from sanctifier.core.models import UnsafePattern
from sanctifier.core.patterns.catalog import ABORT_MACROS, FALLIBLE_ACCESSORS
from sanctifier.exceptions import AnalysisError
from sanctifier.syntax import SyntaxTree, iter_preorder, node_line, node_text

logger = logging.getLogger(__name__)

# Named children of an ``arguments`` node that are not arguments.
_NON_ARGUMENT_KINDS = frozenset({"attribute_item", "line_comment", "block_comment"})


# ---------------------------------------------------------------------------
# Node matchers
# ---------------------------------------------------------------------------


def _match_macro(node: Node, source: bytes) -> UnsafePattern | None:
    macro = node.child_by_field_name("macro")
    if macro is None:
        raise AnalysisError("macro_invocation without a macro path")
    # Only bare names count: ``std::panic!`` is a different path.
    if macro.type != "identifier":
        return None
    name = node_text(macro, source)
    kind = ABORT_MACROS.get(name)
    if kind is None:
        return None
    return UnsafePattern(pattern_kind=kind, source_line=node_line(macro), snippet=f"{name}!")


def _match_method_call(node: Node, source: bytes) -> UnsafePattern | None:
    callee = node.child_by_field_name("function")
    if callee is not None and callee.type == "generic_function":
        callee = callee.child_by_field_name("function")
    if callee is None or callee.type != "field_expression":
        return None

    method = callee.child_by_field_name("field")
    if method is None or method.type != "field_identifier":
        return None
    name = node_text(method, source)
    accessor = FALLIBLE_ACCESSORS.get(name)
    if accessor is None:
        return None

    kind, arity = accessor
    if _argument_count(node.child_by_field_name("arguments")) != arity:
        return None
    return UnsafePattern(pattern_kind=kind, source_line=node_line(method), snippet=name)


def _argument_count(arguments: Node | None) -> int:
    if arguments is None:
        raise AnalysisError("call_expression without an argument list")
    return sum(1 for c in arguments.named_children if c.type not in _NON_ARGUMENT_KINDS)


_MATCHERS: dict[str, Callable[[Node, bytes], UnsafePattern | None]] = {
    "macro_invocation": _match_macro,
    "call_expression": _match_method_call,
}


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def collect_unsafe_patterns(tree: SyntaxTree) -> list[UnsafePattern]:
    """Collect every abort-prone call site in ``tree``.

    Args:
        tree: A parsed, error-free syntax tree.

    Returns:
        Matches in pre-order traversal order. Empty if the tree does not
        have the structure the walk expects; a partial result is never
        returned.
    """
    patterns: list[UnsafePattern] = []
    try:
        for node in iter_preorder(tree.root):
            matcher = _MATCHERS.get(node.type)
            if matcher is None:
                continue
            found = matcher(node, tree.source)
            if found is not None:
                patterns.append(found)
    except (AnalysisError, AttributeError, TypeError) as exc:
        logger.warning("Abort-pattern walk failed: %s", exc)
        return []
    return patterns
