#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
jsxcheck/ast_helper.py
══════════════════════

Parsing and syntax-tree utilities for JavaScript/JSX sources.

Parsing is delegated to tree-sitter with the ``tree-sitter-javascript``
grammar, which understands JSX out of the box.  This module offers:

    ┌─────────────────────────────────────────────────────────────────┐
    │  Sources                                                        │
    │    • SourceFile: path, raw bytes, tree, 1-based locations       │
    │    • parse_source / read_source                                 │
    ├─────────────────────────────────────────────────────────────────┤
    │  Node access                                                    │
    │    • node_text, field, expression_children                      │
    │    • strip_parens (ESTree has no parenthesised nodes)           │
    ├─────────────────────────────────────────────────────────────────┤
    │  Traversal                                                      │
    │    • iter_preorder, iter_comments, first_error_node             │
    └─────────────────────────────────────────────────────────────────┘

Design Principles
─────────────────
1. **Non-invasive**: trees are never modified.
2. **Defensive**: helpers accept ``None`` and return ``None``/empty
   results instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Node, Parser, Tree

from jsxcheck.errors import SourceError

logger = logging.getLogger(__name__)

__all__ = [
    "JS_LANGUAGE",
    "JS_SUFFIXES",
    "Node",
    "SourceFile",
    "parse_source",
    "read_source",
    "node_text",
    "field",
    "expression_children",
    "strip_parens",
    "is_identifier",
    "string_value",
    "iter_preorder",
    "iter_comments",
    "first_error_node",
]


JS_LANGUAGE = Language(tsjs.language())

# File suffixes picked up when a directory is linted.
JS_SUFFIXES = frozenset({".js", ".jsx", ".mjs", ".cjs"})

# Node types that never carry an expression of interest.
_TRIVIA_TYPES = frozenset({"comment", "html_comment"})


# ═══════════════════════════════════════════════════════════════════════════
#  SOURCE FILES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SourceFile:
    """
    A parsed source file.

    Attributes
    ----------
    path : display path used in diagnostics
    text : raw UTF-8 bytes that were parsed
    tree : tree-sitter syntax tree
    """
    path: str
    text: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_error(self) -> bool:
        return self.tree.root_node.has_error

    def text_of(self, node: Node) -> str:
        return self.text[node.start_byte:node.end_byte].decode("utf-8", "replace")

    def _column(self, byte_offset: int, byte_column: int) -> int:
        """1-based character column for a byte offset on its row."""
        line_start = byte_offset - byte_column
        return len(self.text[line_start:byte_offset].decode("utf-8", "replace")) + 1

    def location(self, node: Node) -> Tuple[int, int, int, int]:
        """``(line, column, end_line, end_column)``, all 1-based."""
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        return (
            start_row + 1,
            self._column(node.start_byte, start_col),
            end_row + 1,
            self._column(node.end_byte, end_col),
        )

    def line(self, number: int) -> str:
        """Source text of the 1-based line *number* (without newline)."""
        lines = self.text.decode("utf-8", "replace").splitlines()
        if 1 <= number <= len(lines):
            return lines[number - 1]
        return ""


def _make_parser() -> Parser:
    return Parser(JS_LANGUAGE)


def parse_source(text: Union[str, bytes], path: str = "<input>") -> SourceFile:
    """Parse JavaScript/JSX *text* into a ``SourceFile``."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    tree = _make_parser().parse(data)
    if tree.root_node.has_error:
        logger.debug("%s: syntax tree contains errors", path)
    return SourceFile(path=path, text=data, tree=tree)


def read_source(path: Union[str, Path]) -> SourceFile:
    """Read and parse a file from disk; raises ``SourceError`` on failure."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise SourceError(str(p), exc.strerror or str(exc)) from exc
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceError(str(p), f"not valid UTF-8 ({exc.reason})") from exc
    logger.debug("Parsing %s (%d bytes)", p, len(data))
    return parse_source(data, str(p))


# ═══════════════════════════════════════════════════════════════════════════
#  NODE ACCESS
# ═══════════════════════════════════════════════════════════════════════════

def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", "replace")


def field(node: Optional[Node], name: str) -> Optional[Node]:
    """``node.child_by_field_name(name)`` that tolerates ``None``."""
    if node is None:
        return None
    return node.child_by_field_name(name)


def expression_children(node: Optional[Node]) -> List[Node]:
    """Named children of *node* without comments."""
    if node is None:
        return []
    return [c for c in node.named_children if c.type not in _TRIVIA_TYPES]


def strip_parens(node: Optional[Node]) -> Optional[Node]:
    """Unwrap ``parenthesized_expression`` layers: ``((x))`` → ``x``."""
    while node is not None and node.type == "parenthesized_expression":
        inner = expression_children(node)
        node = inner[0] if inner else None
    return node


def is_identifier(node: Optional[Node]) -> bool:
    return node is not None and node.type == "identifier"


def string_value(node: Optional[Node]) -> Optional[str]:
    """Contents of a string literal without its quotes, else ``None``."""
    if node is None or node.type != "string":
        return None
    raw = node_text(node)
    return raw[1:-1] if len(raw) >= 2 else ""


# ═══════════════════════════════════════════════════════════════════════════
#  TRAVERSAL
# ═══════════════════════════════════════════════════════════════════════════

def iter_preorder(root: Optional[Node]) -> Iterator[Node]:
    """Yield named nodes in pre-order (parent before children, left to right)."""
    if root is None:
        return
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


def iter_comments(root: Optional[Node]) -> Iterator[Node]:
    for node in iter_preorder(root):
        if node.type == "comment":
            yield node


def first_error_node(root: Optional[Node]) -> Optional[Node]:
    """First ``ERROR`` or missing node in source order, if any."""
    if root is None or not root.has_error:
        return None
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        # children, not named_children: missing tokens are anonymous
        stack.extend(c for c in reversed(node.children) if c.has_error or c.is_missing)
    return root
