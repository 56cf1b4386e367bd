# tests/test_directives.py
"""
Tests for the directive-comment grammar and inline suppressions.
"""

import logging

import pytest
from parsimonious.exceptions import ParseError

from jsxcheck.ast_helper import parse_source
from jsxcheck.checkers import (
    CheckerRunner,
    Diagnostic,
    DiagnosticSeverity,
    SourceLocation,
    SuppressionManager,
)
from jsxcheck.directives import (
    DIRECTIVE_GRAMMAR,
    DirectiveKind,
    comment_body,
    iter_directives,
    parse_directive,
)
from tests.conftest import lint


RULE = "no-allocation-in-props"


class TestGrammar:

    @pytest.mark.parametrize("text", [
        "jsxcheck-disable",
        "jsxcheck-enable",
        "jsxcheck-disable-line",
        "jsxcheck-disable-next-line",
        "jsxcheck-disable no-allocation-in-props",
        "jsxcheck-disable a, b,c",
        "jsxcheck-disable-line a -- because",
        "jsxcheck-enable -- done",
        "jsxcheck-disable react/no-allocation-in-props",
    ])
    def test_accepts(self, text):
        assert DIRECTIVE_GRAMMAR.parse(text).text == text

    @pytest.mark.parametrize("text", [
        "jsxcheck-disabled",
        "jsxcheck-disable ,",
        "jsxcheck-ignore",
        "eslint-disable",
    ])
    def test_rejects(self, text):
        with pytest.raises(ParseError):
            DIRECTIVE_GRAMMAR.parse(text)


class TestParseDirective:

    def test_kind_without_rules(self):
        d = parse_directive("jsxcheck-disable-next-line")
        assert d.kind is DirectiveKind.DISABLE_NEXT_LINE
        assert d.rules == frozenset()
        assert d.applies_to(RULE)
        assert d.applies_to("anything")

    def test_rule_list(self):
        d = parse_directive("jsxcheck-disable  no-allocation-in-props ,  other")
        assert d.kind is DirectiveKind.DISABLE
        assert d.rules == {RULE, "other"}
        assert d.applies_to(RULE)
        assert not d.applies_to("third")

    def test_description(self):
        d = parse_directive("jsxcheck-disable-line no-allocation-in-props -- legacy markup")
        assert d.kind is DirectiveKind.DISABLE_LINE
        assert d.rules == {RULE}
        assert d.description == "legacy markup"

    def test_multiline_block_body(self):
        d = parse_directive("jsxcheck-enable\n   no-allocation-in-props")
        assert d.kind is DirectiveKind.ENABLE
        assert d.rules == {RULE}

    def test_ordinary_comment(self):
        assert parse_directive("just a comment") is None

    def test_malformed_directive_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger="jsxcheck")
        assert parse_directive("jsxcheck-disable-line ,,") is None
        assert "malformed directive" in caplog.text


class TestCommentBody:

    @pytest.mark.parametrize("raw,body", [
        ("// jsxcheck-disable", "jsxcheck-disable"),
        ("/* jsxcheck-disable */", "jsxcheck-disable"),
        ("/*jsxcheck-enable*/", "jsxcheck-enable"),
        ("/** @jsx h */", "* @jsx h"),
    ])
    def test_strips_delimiters(self, raw, body):
        assert comment_body(raw) == body


class TestIterDirectives:

    def test_locations(self):
        source = parse_source(
            "/* jsxcheck-disable */\n"
            "foo();\n"
            "bar(); // jsxcheck-disable-line x\n"
            "/* not a directive */\n"
            "/*\n  jsxcheck-enable\n*/\n"
        )
        found = list(iter_directives(source))
        assert [d.kind for d in found] == [
            DirectiveKind.DISABLE,
            DirectiveKind.DISABLE_LINE,
            DirectiveKind.ENABLE,
        ]
        assert (found[0].line, found[0].column) == (1, 1)
        assert (found[1].line, found[1].column) == (3, 8)
        assert (found[2].line, found[2].end_line) == (5, 7)


class TestInlineSuppression:

    def test_disable_line(self):
        code = "<Foo bar={[1]} />; // jsxcheck-disable-line no-allocation-in-props\n<Foo bar={[2]} />;"
        assert [d.location.line for d in lint(code)] == [2]

    def test_disable_next_line(self):
        code = "// jsxcheck-disable-next-line\n<Foo bar={[1]} />;\n<Foo bar={[2]} />;"
        assert [d.location.line for d in lint(code)] == [3]

    def test_disable_next_line_after_block_comment(self):
        code = "/*\n jsxcheck-disable-next-line\n*/\n<Foo bar={[1]} />;"
        assert lint(code) == []

    def test_region(self):
        code = (
            "/* jsxcheck-disable */\n"
            "<Foo bar={[1]} />;\n"
            "/* jsxcheck-enable */\n"
            "<Foo bar={[2]} />;\n"
        )
        assert [d.location.line for d in lint(code)] == [4]

    def test_region_for_other_rule(self):
        code = "/* jsxcheck-disable other-rule */\n<Foo bar={[1]} />;"
        assert len(lint(code)) == 1

    def test_enable_for_other_rule_keeps_region(self):
        code = (
            "/* jsxcheck-disable */\n"
            "/* jsxcheck-enable other-rule */\n"
            "<Foo bar={[1]} />;\n"
        )
        assert lint(code) == []

    def test_region_starts_mid_line(self):
        code = "<A a={[1]} />; /* jsxcheck-disable */ <B b={[2]} />;"
        diags = lint(code)
        assert [d.location.column for d in diags] == [4]


class TestSuppressionManager:

    def _diag(self, rule_id=RULE, fatal=False):
        return Diagnostic(
            rule_id=rule_id,
            message="m",
            severity=DiagnosticSeverity.ERROR,
            location=SourceLocation("a.jsx", 1, 1, 1, 2),
            fatal=fatal,
        )

    def test_global_suppression(self):
        sm = SuppressionManager()
        sm.add_global_suppression(RULE)
        assert sm.is_suppressed(self._diag())
        assert not sm.is_suppressed(self._diag("other"))

    def test_wildcard(self):
        sm = SuppressionManager()
        sm.add_global_suppression("*")
        assert sm.filter_diagnostics([self._diag(), self._diag("other")]) == []

    def test_fatal_never_suppressed(self):
        sm = SuppressionManager()
        sm.add_global_suppression("*")
        assert not sm.is_suppressed(self._diag("parse-error", fatal=True))

    def test_parse_error_survives_global_suppression(self):
        sm = SuppressionManager()
        sm.add_global_suppression("*")
        runner = CheckerRunner(suppressions=sm)
        results = runner.run(parse_source("<Foo bar={[1, 2} />", "broken.jsx"))
        assert [d.rule_id for d in results.diagnostics] == ["parse-error"]

    def test_reload_replaces_file_state(self):
        sm = SuppressionManager()
        sm.load_inline_suppressions(parse_source("x; // jsxcheck-disable-line", "a.jsx"))
        assert sm.is_suppressed(self._diag())
        sm.load_inline_suppressions(parse_source("x;", "a.jsx"))
        assert not sm.is_suppressed(self._diag())
