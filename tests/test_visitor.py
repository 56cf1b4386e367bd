# tests/test_visitor.py
"""
Tests for the depth-first visitor and the allocation tracker built on it.
"""

from jsxcheck.allocation import ViolationKind
from jsxcheck.ast_helper import parse_source
from jsxcheck.config import RuleOptions
from jsxcheck.jsx_util import ReactCapabilities
from jsxcheck.tracker import AllocationTracker, DeclarationKind
from jsxcheck.visitor import DepthFirstVisitor
from tests.conftest import find_nodes


class _Recorder(DepthFirstVisitor):

    def __init__(self):
        super().__init__()
        self.events = []
        self.identifier_ancestors = None

    def enter(self, node):
        self.events.append(("enter", node.type))

    def leave(self, node):
        self.events.append(("leave", node.type))

    def enter_identifier(self, node):
        self.identifier_ancestors = [n.type for n in self.ancestors]


class TestDepthFirstVisitor:

    def test_preorder_with_leave_events(self):
        rec = _Recorder()
        rec.walk(parse_source("{ x; }").root)
        assert rec.events == [
            ("enter", "program"),
            ("enter", "statement_block"),
            ("enter", "expression_statement"),
            ("enter", "identifier"),
            ("leave", "identifier"),
            ("leave", "expression_statement"),
            ("leave", "statement_block"),
            ("leave", "program"),
        ]

    def test_ancestors_exclude_current_node(self):
        rec = _Recorder()
        rec.walk(parse_source("{ x; }").root)
        assert rec.identifier_ancestors == [
            "program", "statement_block", "expression_statement",
        ]
        assert rec.ancestors == []
        assert rec.parent is None

    def test_deep_nesting_does_not_recurse(self):
        code = "<a>" * 600 + "</a>" * 600
        rec = _Recorder()
        rec.walk(parse_source(code).root)
        assert rec.events.count(("enter", "jsx_element")) == 600


class TestDeclarationKind:

    def test_kinds(self):
        source = parse_source("const a = 1; let b = 2; var c = 3;")
        kinds = [
            DeclarationKind.of(d.parent)
            for d in find_nodes(source, "variable_declarator")
        ]
        assert kinds == [DeclarationKind.CONST, DeclarationKind.LET, DeclarationKind.VAR]

    def test_none(self):
        assert DeclarationKind.of(None) is None
        source = parse_source("x;")
        assert DeclarationKind.of(source.root) is None


class TestAllocationTracker:

    def _track(self, code, options=None):
        reports = []
        tracker = AllocationTracker(
            options=options or RuleOptions(),
            capabilities=ReactCapabilities(),
            report=lambda node, kind: reports.append((node.type, kind)),
        )
        tracker.walk(parse_source(code).root)
        return tracker, reports

    def test_one_record_per_block(self):
        tracker, _ = self._track("function a() { if (x) { } }\n() => { };")
        assert len(tracker.registry) == 3

    def test_parent_links_follow_nesting(self):
        tracker, _ = self._track("function a() { if (x) { } }")
        outer, inner = list(tracker.registry)
        assert outer.parent is None
        assert inner.parent == outer.block_id

    def test_only_const_allocations_recorded(self):
        tracker, _ = self._track(
            "function a() { const x = [1]; const y = {}; let z = []; const w = 1; }"
        )
        (record,) = list(tracker.registry)
        assert record.array_bound == {"x"}
        assert record.object_bound == {"y"}

    def test_open_block_stack_is_empty_after_walk(self):
        tracker, _ = self._track("function a() { { } }")
        assert tracker.current_block is None
        assert tracker.block_chain() == []

    def test_report_anchor_types(self):
        _, reports = self._track(
            "<Foo bar={[1]} />;\nReact.createElement(Foo, { bar: {} });"
        )
        assert reports == [
            ("jsx_attribute", ViolationKind.ARRAY),
            ("pair", ViolationKind.OBJECT),
        ]

    def test_shorthand_anchor(self):
        _, reports = self._track(
            "function C() { const bar = []; React.createElement(Foo, { bar }); }"
        )
        assert reports == [("shorthand_property_identifier", ViolationKind.ARRAY)]
