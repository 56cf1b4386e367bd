#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
jsxcheck/visitor.py
===================

Visitor infrastructure for tree-sitter syntax trees.

Provides:
- ``DepthFirstVisitor`` — strict pre-order walk with ``enter_X`` /
  ``leave_X`` hooks keyed by node type, and the ancestor stack of the
  node currently being visited.

The walk is iterative, so deeply nested JSX does not hit the interpreter
recursion limit.  Only named nodes are visited.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from jsxcheck.ast_helper import Node

__all__ = [
    "DepthFirstVisitor",
]


class DepthFirstVisitor:
    """Pre-order visitor over a tree-sitter tree.

    For a node of type ``statement_block`` the walker calls
    ``enter_statement_block(node)`` before any descendant is visited and
    ``leave_statement_block(node)`` after all of them.  Missing hooks are
    skipped.  ``enter`` / ``leave`` are called for every node.

    During a hook, ``ancestors`` holds the chain from the root down to
    the node's parent (the node itself is not included).
    """

    def __init__(self) -> None:
        self._ancestors: List[Node] = []
        self._hooks: Dict[Tuple[str, str], Optional[Callable[[Node], Any]]] = {}

    @property
    def ancestors(self) -> List[Node]:
        return list(self._ancestors)

    @property
    def parent(self) -> Optional[Node]:
        return self._ancestors[-1] if self._ancestors else None

    # Hook methods, overridden by subclasses

    def enter(self, node: Node) -> None:
        """Called before visiting children."""
        pass

    def leave(self, node: Node) -> None:
        """Called after visiting children."""
        pass

    def _hook(self, prefix: str, node_type: str) -> Optional[Callable[[Node], Any]]:
        key = (prefix, node_type)
        if key not in self._hooks:
            self._hooks[key] = getattr(self, f"{prefix}_{node_type}", None)
        return self._hooks[key]

    def walk(self, root: Node) -> None:
        """Visit *root* and all of its named descendants."""
        stack: List[Tuple[Node, bool]] = [(root, False)]
        while stack:
            node, done = stack.pop()
            if done:
                self._ancestors.pop()
                hook = self._hook("leave", node.type)
                if hook is not None:
                    hook(node)
                self.leave(node)
                continue

            self.enter(node)
            hook = self._hook("enter", node.type)
            if hook is not None:
                hook(node)

            self._ancestors.append(node)
            stack.append((node, True))
            for child in reversed(node.named_children):
                stack.append((child, False))
