#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
jsxcheck/jsx_util.py
════════════════════

Element-construction predicates.

Checkers never inspect callee shapes or tag names themselves; they ask
an ``ElementCapabilities`` object two questions:

  • ``is_factory_invocation(call)`` — is this call a "create a UI
    element" call (``React.createElement(...)``)?
  • ``is_host_element(node)`` — does this opening element, or this
    factory-call first argument, denote a built-in element such as
    ``div`` rather than a user component?

``ReactCapabilities`` answers them for React-style code:

  • factory calls are ``<pragma>.createElement(...)``, or a bare
    ``createElement(...)`` when ``createElement`` was destructured from
    the pragma (``import { createElement } from 'react'``,
    ``const { createElement } = React``, ``require('react')``);
  • the pragma comes from settings (default ``React``) unless the file
    carries a ``/** @jsx h */`` annotation;
  • host elements are JSX names starting with a lowercase letter and
    string-literal first arguments of a factory call.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol, runtime_checkable

from jsxcheck.ast_helper import (
    Node,
    SourceFile,
    expression_children,
    field,
    is_identifier,
    iter_comments,
    iter_preorder,
    node_text,
    string_value,
)
from jsxcheck.config import DEFAULT_PRAGMA, Settings, is_valid_pragma

logger = logging.getLogger(__name__)

__all__ = [
    "ElementCapabilities",
    "ReactCapabilities",
    "pragma_from_comments",
    "FACTORY_NAME",
]

FACTORY_NAME = "createElement"

_JSX_ANNOTATION_RE = re.compile(r"@jsx\s+(\S+)")
_HOST_TAG_RE = re.compile(r"^[a-z]")

_OPENING_ELEMENT_TYPES = frozenset({"jsx_opening_element", "jsx_self_closing_element"})


@runtime_checkable
class ElementCapabilities(Protocol):
    """Predicates a checker needs to recognise element construction."""

    def is_factory_invocation(self, call: Node) -> bool: ...

    def is_host_element(self, node: Node) -> bool: ...


def pragma_from_comments(source: SourceFile) -> Optional[str]:
    """Pragma named by the first ``@jsx`` annotation comment, if any."""
    for comment in iter_comments(source.root):
        match = _JSX_ANNOTATION_RE.search(node_text(comment))
        if match is None:
            continue
        pragma = match.group(1).split(".")[0].rstrip("*/")
        if is_valid_pragma(pragma):
            return pragma
        logger.warning(
            "%s: ignoring @jsx pragma %r, not a valid identifier",
            source.path, match.group(1),
        )
    return None


def _destructures_factory(source: SourceFile, pragma: str) -> bool:
    """True if the file binds ``createElement`` from the pragma module."""
    module = pragma.lower()
    for node in iter_preorder(source.root):
        if node.type == "import_statement":
            if string_value(field(node, "source")) != module:
                continue
            for specifier in iter_preorder(node):
                if specifier.type != "import_specifier" or field(specifier, "alias") is not None:
                    continue
                if node_text(field(specifier, "name")) == FACTORY_NAME:
                    return True
        elif node.type == "variable_declarator":
            pattern = field(node, "name")
            if pattern is None or pattern.type != "object_pattern":
                continue
            if not _is_pragma_source(field(node, "value"), pragma, module):
                continue
            for prop in expression_children(pattern):
                if (prop.type == "shorthand_property_identifier_pattern"
                        and node_text(prop) == FACTORY_NAME):
                    return True
    return False


def _is_pragma_source(value: Optional[Node], pragma: str, module: str) -> bool:
    if value is None:
        return False
    if is_identifier(value):
        return node_text(value) == pragma
    if value.type == "call_expression" and node_text(field(value, "function")) == "require":
        args = expression_children(field(value, "arguments"))
        return bool(args) and string_value(args[0]) == module
    return False


class ReactCapabilities:
    """
    ``ElementCapabilities`` for React-style element construction.

    Usage
    -----
    >>> caps = ReactCapabilities.for_source(source, Settings())
    >>> caps.is_factory_invocation(call_node)
    True
    """

    def __init__(self, pragma: str = DEFAULT_PRAGMA, destructured_factory: bool = False) -> None:
        self.pragma = pragma
        self.destructured_factory = destructured_factory

    @classmethod
    def for_source(cls, source: SourceFile, settings: Optional[Settings] = None) -> ReactCapabilities:
        settings = settings or Settings()
        pragma = pragma_from_comments(source) or settings.pragma
        return cls(
            pragma=pragma,
            destructured_factory=_destructures_factory(source, pragma),
        )

    def is_factory_invocation(self, call: Node) -> bool:
        if call.type != "call_expression":
            return False
        callee = field(call, "function")
        if callee is None:
            return False
        if callee.type == "member_expression":
            return (
                node_text(field(callee, "property")) == FACTORY_NAME
                and is_identifier(field(callee, "object"))
                and node_text(field(callee, "object")) == self.pragma
            )
        return (
            self.destructured_factory
            and is_identifier(callee)
            and node_text(callee) == FACTORY_NAME
        )

    def is_host_element(self, node: Node) -> bool:
        if node.type in _OPENING_ELEMENT_TYPES:
            name = field(node, "name")
            if name is None:
                # fragments have no name and no attributes
                return False
            return bool(_HOST_TAG_RE.match(node_text(name)))
        return node.type == "string"

    def __repr__(self) -> str:
        return f"<ReactCapabilities pragma={self.pragma!r}>"
