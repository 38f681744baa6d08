"""Locate persisted struct declarations in a Rust syntax tree.

tree-sitter attaches outer attributes (``#[...]``) as *siblings* preceding
the item they annotate, not as children of it. The markers of a struct are
therefore read by walking backwards over the ``attribute_item`` siblings
directly above its ``struct_item`` node, skipping interleaved comments.

Only bare path attributes count as markers: ``#[contracttype]`` tags a
struct, while ``#[contracttype(export = false)]``, ``#[doc = "..."]`` and
``#[soroban_sdk::contracttype]`` do not.
"""

from __future__ import annotations

from tree_sitter import Node

from sanctifier.core.models import TaggedStructure
from sanctifier.exceptions import AnalysisError
from sanctifier.syntax import SyntaxTree, iter_preorder, node_line, node_text

_COMMENT_KINDS = frozenset({"line_comment", "block_comment"})


def declaration_markers(item: Node, source: bytes) -> list[str]:
    """Return the bare attribute names annotating ``item``, top to bottom."""
    markers: list[str] = []
    sibling = item.prev_sibling
    while sibling is not None and (
        sibling.type == "attribute_item" or sibling.type in _COMMENT_KINDS
    ):
        if sibling.type == "attribute_item":
            name = _bare_attribute_name(sibling, source)
            if name is not None:
                markers.append(name)
        sibling = sibling.prev_sibling
    markers.reverse()
    return markers


def _bare_attribute_name(attribute_item: Node, source: bytes) -> str | None:
    attribute = next(
        (c for c in attribute_item.named_children if c.type == "attribute"), None
    )
    if attribute is None:
        return None
    if (
        attribute.child_by_field_name("arguments") is not None
        or attribute.child_by_field_name("value") is not None
    ):
        return None
    path = attribute.named_children[0] if attribute.named_children else None
    if path is None or path.type != "identifier":
        return None
    return node_text(path, source)


def resolve_type_name(type_node: Node, source: bytes) -> str | None:
    """Resolve a field type to the name used for size lookup.

    Path types resolve to their last segment, with generic arguments
    dropped: ``u64`` -> ``u64``, ``soroban_sdk::Address`` -> ``Address``,
    ``Vec<Address>`` -> ``Vec``. Anything that is not a path (references,
    tuples, arrays, slices, pointers, function and trait-object types)
    resolves to ``None``.
    """
    kind = type_node.type
    if kind in ("type_identifier", "primitive_type"):
        return node_text(type_node, source)
    if kind == "scoped_type_identifier":
        name = type_node.child_by_field_name("name")
        return node_text(name, source) if name is not None else None
    if kind == "generic_type":
        inner = type_node.child_by_field_name("type")
        return resolve_type_name(inner, source) if inner is not None else None
    return None


def _field_type_nodes(struct_item: Node) -> list[Node]:
    body = struct_item.child_by_field_name("body")
    if body is None:
        return []
    if body.type == "field_declaration_list":
        types = []
        for decl in body.named_children:
            if decl.type != "field_declaration":
                continue
            ty = decl.child_by_field_name("type")
            if ty is None:
                raise AnalysisError("field_declaration without a type")
            types.append(ty)
        return types
    if body.type == "ordered_field_declaration_list":
        return list(body.children_by_field_name("type"))
    return []


def find_tagged_structures(tree: SyntaxTree, marker: str) -> list[TaggedStructure]:
    """Return every struct in ``tree`` annotated with ``#[marker]``.

    Structs nested in inline ``mod`` blocks or function bodies are found
    as well. Results follow declaration order.

    Raises:
        AnalysisError: If a struct or field is missing a required part.
    """
    found: list[TaggedStructure] = []
    for node in iter_preorder(tree.root):
        if node.type != "struct_item":
            continue
        if marker not in declaration_markers(node, tree.source):
            continue
        name = node.child_by_field_name("name")
        if name is None:
            raise AnalysisError("struct_item without a name")
        found.append(TaggedStructure(
            name=node_text(name, tree.source),
            field_types=tuple(
                resolve_type_name(ty, tree.source) for ty in _field_type_nodes(node)
            ),
            line=node_line(node),
        ))
    return found
