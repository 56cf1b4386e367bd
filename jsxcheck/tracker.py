#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
jsxcheck/tracker.py
═══════════════════

Scope-aware allocation tracker behind ``no-allocation-in-props``.

One pre-order walk drives everything:

  statement_block      → open a ``BlockScope`` whose parent is the block
                         currently open (Scope Registry)
  variable_declarator  → ``const`` bound to a fresh allocation is
                         recorded on the nearest block (Binding Recorder)
  jsx_attribute        → attribute value is a usage site
  call_expression      → each property of a factory call's props object
                         is a usage site (Usage Resolver)

A usage site whose value is a bare identifier is resolved through the
chain of open blocks, innermost first; any other value is classified
directly.  Confirmed violations go to the ``report`` callback together
with the node the diagnostic is anchored at.

Because the walk is single-pass, a binding is only seen by usages that
come after it in source order.
"""

from __future__ import annotations

import enum
from typing import Callable, List, Optional

from jsxcheck.allocation import ViolationKind, classify
from jsxcheck.ast_helper import (
    Node,
    expression_children,
    field,
    is_identifier,
    node_text,
    strip_parens,
)
from jsxcheck.config import RuleOptions
from jsxcheck.jsx_util import ElementCapabilities
from jsxcheck.scope import ScopeRegistry
from jsxcheck.visitor import DepthFirstVisitor

__all__ = [
    "AllocationTracker",
    "DeclarationKind",
    "ReportCallback",
]

ReportCallback = Callable[[Node, ViolationKind], None]


class DeclarationKind(enum.Enum):
    """Declaration forms; only ``CONST`` bindings are tracked."""
    CONST = "const"
    LET = "let"
    VAR = "var"

    @classmethod
    def of(cls, declaration: Optional[Node]) -> Optional[DeclarationKind]:
        if declaration is None:
            return None
        if declaration.type == "variable_declaration":
            return cls.VAR
        if declaration.type == "lexical_declaration" and declaration.children:
            keyword = declaration.children[0].type
            if keyword in ("const", "let"):
                return cls(keyword)
        return None


class AllocationTracker(DepthFirstVisitor):
    """
    Walks one file and reports props that receive fresh allocations.

    Parameters
    ----------
    options      : resolved rule options
    capabilities : element-construction predicates
    report       : called once per violation with ``(node, kind)``
    """

    def __init__(
        self,
        options: RuleOptions,
        capabilities: ElementCapabilities,
        report: ReportCallback,
    ) -> None:
        super().__init__()
        self.options = options
        self.capabilities = capabilities
        self.registry = ScopeRegistry()
        self._report = report
        self._open_blocks: List[int] = []

    # ── scope registry ───────────────────────────────────────────────

    @property
    def current_block(self) -> Optional[int]:
        return self._open_blocks[-1] if self._open_blocks else None

    def block_chain(self) -> List[int]:
        """Open blocks enclosing the current node, innermost first."""
        return self.registry.chain(self.current_block)

    def enter_statement_block(self, node: Node) -> None:
        self.registry.enter_block(node.start_byte, parent=self.current_block)
        self._open_blocks.append(node.start_byte)

    def leave_statement_block(self, node: Node) -> None:
        self._open_blocks.pop()

    # ── binding recorder ─────────────────────────────────────────────

    def enter_variable_declarator(self, node: Node) -> None:
        init = field(node, "value")
        if init is None or self.current_block is None:
            return
        if DeclarationKind.of(self.parent) is not DeclarationKind.CONST:
            return
        name = field(node, "name")
        if not is_identifier(name):
            return
        kind = classify(init, self.options)
        if kind is not None:
            self.registry.record_binding(self.current_block, kind, node_text(name))

    # ── usage resolver ───────────────────────────────────────────────

    def enter_jsx_attribute(self, node: Node) -> None:
        owner = self.parent
        if (self.options.ignore_dom_components
                and owner is not None
                and self.capabilities.is_host_element(owner)):
            return

        parts = expression_children(node)
        if len(parts) < 2 or parts[-1].type != "jsx_expression":
            # bare attribute or string value
            return
        inner = expression_children(parts[-1])
        if not inner:
            return
        self._resolve(node, inner[0])

    def enter_call_expression(self, node: Node) -> None:
        if not self.capabilities.is_factory_invocation(node):
            return
        args = expression_children(field(node, "arguments"))
        if not args:
            return
        if self.options.ignore_dom_components and self.capabilities.is_host_element(args[0]):
            return
        if len(args) < 2 or args[1].type != "object":
            return

        for prop in expression_children(args[1]):
            if prop.type == "pair":
                self._resolve(prop, field(prop, "value"))
            elif prop.type == "shorthand_property_identifier":
                self._resolve_identifier(prop, node_text(prop))

    def _resolve(self, site: Node, value: Optional[Node]) -> None:
        value = strip_parens(value)
        if value is None:
            return
        if is_identifier(value):
            self._resolve_identifier(site, node_text(value))
            return
        kind = classify(value, self.options)
        if kind is not None:
            self._report(site, kind)

    def _resolve_identifier(self, site: Node, name: str) -> None:
        kind = self.registry.lookup(self.block_chain(), name)
        if kind is not None:
            self._report(site, kind)
