"""Tables of abort-prone constructs.

Kept apart from the visitor so the catalogs can be tested and extended
without touching the traversal.
"""

from __future__ import annotations

from sanctifier.core.models import PatternKind

# Macro name (single identifier, without the ``!``) -> pattern kind.
ABORT_MACROS: dict[str, PatternKind] = {
    "panic": PatternKind.UNCONDITIONAL_ABORT,
}

# Method name -> (pattern kind, argument count).
# ``unwrap`` takes no argument; ``expect`` takes exactly one message.
FALLIBLE_ACCESSORS: dict[str, tuple[PatternKind, int]] = {
    "unwrap": (PatternKind.FALLIBLE_UNWRAP, 0),
    "expect": (PatternKind.FALLIBLE_EXPECT, 1),
}
