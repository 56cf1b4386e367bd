"""
directives.py — inline directive comments
=========================================

Comments of the form::

    // jsxcheck-disable-next-line no-allocation-in-props
    <Foo bar={[1, 2]} />

    /* jsxcheck-disable */
    ...
    /* jsxcheck-enable */

    <Foo style={{}} />  // jsxcheck-disable-line -- legacy markup

switch rules off for a line or a region.  A directive without a rule
list applies to every rule; ``-- text`` at the end is a free-form
description.

Depends on:
    - parsimonious (PEG parser)
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from jsxcheck.ast_helper import SourceFile, iter_comments, node_text

logger = logging.getLogger(__name__)

__all__ = [
    "DIRECTIVE_GRAMMAR",
    "DIRECTIVE_PREFIX",
    "DirectiveKind",
    "Directive",
    "parse_directive",
    "iter_directives",
    "comment_body",
]

DIRECTIVE_PREFIX = "jsxcheck-"


# ═══════════════════════════════════════════════════════════════════
#  GRAMMAR (Parsimonious PEG)
# ═══════════════════════════════════════════════════════════════════

DIRECTIVE_GRAMMAR = Grammar(r'''
    directive     = keyword rule_list? trailer

    # longest keywords first: PEG choice is ordered
    keyword       = "jsxcheck-disable-next-line"
                  / "jsxcheck-disable-line"
                  / "jsxcheck-disable"
                  / "jsxcheck-enable"

    rule_list     = ws rule_name more_rules*
    more_rules    = ws? "," ws? rule_name
    rule_name     = ~r"[A-Za-z0-9_@/][A-Za-z0-9_@/.-]*"

    trailer       = ws? description?
    description   = "--" ~r".*"s

    ws            = ~r"\s+"
''')


class DirectiveKind(enum.Enum):
    DISABLE = "jsxcheck-disable"
    ENABLE = "jsxcheck-enable"
    DISABLE_LINE = "jsxcheck-disable-line"
    DISABLE_NEXT_LINE = "jsxcheck-disable-next-line"


@dataclass(frozen=True)
class Directive:
    """
    A parsed directive comment.

    ``rules`` is empty when the directive applies to all rules.
    ``line`` / ``column`` locate the comment start and ``end_line`` its
    last line (1-based); they are zero for directives parsed from bare
    text.
    """
    kind: DirectiveKind
    rules: FrozenSet[str] = frozenset()
    description: str = ""
    line: int = 0
    column: int = 0
    end_line: int = 0

    def applies_to(self, rule: str) -> bool:
        return not self.rules or rule in self.rules


class _DirectiveVisitor(NodeVisitor):
    """Turns a parse tree of ``DIRECTIVE_GRAMMAR`` into a ``Directive``."""

    grammar = DIRECTIVE_GRAMMAR

    def visit_directive(self, node: Node, visited_children: list) -> Directive:
        kind, rules, description = visited_children
        names = rules[0] if rules else []
        return Directive(
            kind=kind,
            rules=frozenset(names),
            description=description,
        )

    def visit_keyword(self, node: Node, visited_children: list) -> DirectiveKind:
        return DirectiveKind(node.text)

    def visit_rule_list(self, node: Node, visited_children: list) -> List[str]:
        _, first, rest = visited_children
        return [first, *rest]

    def visit_more_rules(self, node: Node, visited_children: list) -> str:
        return visited_children[-1]

    def visit_rule_name(self, node: Node, visited_children: list) -> str:
        return node.text

    def visit_trailer(self, node: Node, visited_children: list) -> str:
        return node.text.strip()[2:].strip()

    def generic_visit(self, node: Node, visited_children: list) -> list:
        return visited_children


def comment_body(text: str) -> str:
    """Strip ``//`` or ``/* */`` delimiters from a comment."""
    text = text.strip()
    if text.startswith("//"):
        return text[2:].strip()
    if text.startswith("/*"):
        text = text[2:]
        if text.endswith("*/"):
            text = text[:-2]
        return text.strip()
    return text


def parse_directive(text: str) -> Optional[Directive]:
    """
    Parse the body of a comment.

    Returns ``None`` for ordinary comments and for malformed directives,
    which are logged and otherwise ignored.
    """
    body = " ".join(text.split())
    if not body.startswith(DIRECTIVE_PREFIX):
        return None
    try:
        return _DirectiveVisitor().parse(body)
    except ParseError as exc:
        logger.warning("Ignoring malformed directive %r: %s", body, exc)
        return None


def iter_directives(source: SourceFile) -> Iterator[Directive]:
    """Directives found in the comments of *source*, in source order."""
    for comment in iter_comments(source.root):
        directive = parse_directive(comment_body(node_text(comment)))
        if directive is None:
            continue
        line, column, end_line, _ = source.location(comment)
        yield Directive(
            kind=directive.kind,
            rules=directive.rules,
            description=directive.description,
            line=line,
            column=column,
            end_line=end_line,
        )
