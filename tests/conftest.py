# tests/conftest.py
"""
Shared fixtures and sample sources for the jsxcheck test-suite.
"""

from __future__ import annotations

from typing import List

import pytest

from jsxcheck.ast_helper import Node, SourceFile, iter_preorder, parse_source
from jsxcheck.checkers import Diagnostic, lint_text


# ═══════════════════════════════════════════════════════════════════════
#  Sample sources
# ═══════════════════════════════════════════════════════════════════════

CLASS_WITH_ARRAY_CONST = """
class Hello extends React.Component {
  render() {
    const bar = [1, 2, 3];
    return <Foo bar={bar} />;
  }
};
"""

CLASS_WITH_NESTED_ARROW = """
class Hello extends React.Component {
  render() {
    const bar = [1, 2, 3];
    const renderFoo = () => {
      return <Foo bar={bar} />;
    };
    return renderFoo();
  }
};
"""

CLASS_WITH_DOM_STYLE = """
class Hello extends React.Component {
  render() {
    const style = { foo: 1 };
    return <div style={style}>Hello {this.state.name}</div>;
  }
};
"""

SIBLING_BLOCKS = """
function a() {
  const bar = [1, 2, 3];
  return null;
}
function b() {
  return <Foo bar={bar} />;
}
"""


# ═══════════════════════════════════════════════════════════════════════
#  Helpers
# ═══════════════════════════════════════════════════════════════════════

def lint(code: str, **options) -> List[Diagnostic]:
    """Run ``no-allocation-in-props`` on *code* with camelCase *options*."""
    return lint_text(code, "test.jsx", options=options or None)


def message_ids(diags: List[Diagnostic]) -> List[str]:
    return [d.message_id for d in diags]


def find_nodes(source: SourceFile, node_type: str) -> List[Node]:
    return [n for n in iter_preorder(source.root) if n.type == node_type]


def first_expression(code: str) -> Node:
    """Expression of the first statement in *code*."""
    source = parse_source(code)
    statement = source.root.named_children[0]
    assert statement.type == "expression_statement"
    return statement.named_children[0]


# ═══════════════════════════════════════════════════════════════════════
#  Fixtures
# ═══════════════════════════════════════════════════════════════════════

@pytest.fixture
def jsx_file(tmp_path):
    """Factory that writes a source file under tmp_path and returns its path."""
    def _write(name: str, code: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        return path
    return _write
