"""
jsxcheck/allocation.py
──────────────────────

Allocation classifier: decides whether an expression allocates a fresh
array or object on every evaluation.

A conditional expression is unwrapped: its condition, consequence and
alternative are classified in that order and the first hit wins.
Parentheses are transparent.
"""

from __future__ import annotations

import enum
from typing import Optional

from jsxcheck.ast_helper import Node, field, strip_parens
from jsxcheck.config import RuleOptions

__all__ = [
    "ViolationKind",
    "classify",
]


class ViolationKind(enum.Enum):
    """
    Kinds of disallowed allocation.

    Each carries:
      • message_id — stable identifier used in JSON output
      • message    — the fixed diagnostic text
    """

    ARRAY = ("array", "Props should not use array allocations")
    OBJECT = ("object", "Props should not use object allocations")

    def __init__(self, message_id: str, message: str) -> None:
        self.message_id = message_id
        self.message = message


_CONDITIONAL_FIELDS = ("condition", "consequence", "alternative")


def classify(node: Optional[Node], options: RuleOptions) -> Optional[ViolationKind]:
    """Return the violation kind of *node* under *options*, or ``None``."""
    node = strip_parens(node)
    if node is None:
        return None

    if node.type == "ternary_expression":
        for name in _CONDITIONAL_FIELDS:
            kind = classify(field(node, name), options)
            if kind is not None:
                return kind
        return None

    if node.type == "array" and not options.allow_arrays:
        return ViolationKind.ARRAY
    if node.type == "object" and not options.allow_objects:
        return ViolationKind.OBJECT
    return None
