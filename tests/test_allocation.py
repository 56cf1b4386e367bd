# tests/test_allocation.py
"""
Tests for the allocation classifier.
"""

import pytest

from jsxcheck.allocation import ViolationKind, classify
from jsxcheck.config import RuleOptions
from tests.conftest import first_expression


DEFAULT = RuleOptions()


class TestViolationKind:

    def test_messages_are_fixed(self):
        assert ViolationKind.ARRAY.message == "Props should not use array allocations"
        assert ViolationKind.OBJECT.message == "Props should not use object allocations"

    def test_message_ids(self):
        assert ViolationKind.ARRAY.message_id == "array"
        assert ViolationKind.OBJECT.message_id == "object"


class TestClassifyLiterals:

    @pytest.mark.parametrize("code", ["[1, 2, 3];", "[];", "[[1], {}];"])
    def test_array_literal(self, code):
        assert classify(first_expression(code), DEFAULT) is ViolationKind.ARRAY

    @pytest.mark.parametrize("code", ["({ foo: 1 });", "({});", "({ ...rest });"])
    def test_object_literal(self, code):
        assert classify(first_expression(code), DEFAULT) is ViolationKind.OBJECT

    @pytest.mark.parametrize("code", [
        "foo;",
        "1;",
        "'text';",
        "foo();",
        "new Array(3);",
        "() => [];",
        "foo.bar;",
    ])
    def test_other_shapes_are_not_allocations(self, code):
        assert classify(first_expression(code), DEFAULT) is None

    def test_parentheses_are_transparent(self):
        assert classify(first_expression("(([1]));"), DEFAULT) is ViolationKind.ARRAY

    def test_none_is_not_an_allocation(self):
        assert classify(None, DEFAULT) is None


class TestClassifyOptions:

    def test_allow_arrays(self):
        opts = RuleOptions(allow_arrays=True)
        assert classify(first_expression("[1];"), opts) is None
        assert classify(first_expression("({});"), opts) is ViolationKind.OBJECT

    def test_allow_objects(self):
        opts = RuleOptions(allow_objects=True)
        assert classify(first_expression("({});"), opts) is None
        assert classify(first_expression("[1];"), opts) is ViolationKind.ARRAY


class TestClassifyConditional:

    def test_consequent(self):
        node = first_expression("cond ? [1] : foo;")
        assert classify(node, DEFAULT) is ViolationKind.ARRAY

    def test_alternate(self):
        node = first_expression("cond ? foo : { a: 1 };")
        assert classify(node, DEFAULT) is ViolationKind.OBJECT

    def test_first_branch_wins(self):
        node = first_expression("cond ? { a: 1 } : [1];")
        assert classify(node, DEFAULT) is ViolationKind.OBJECT

    def test_test_branch_classified_first(self):
        node = first_expression("[] ? {} : {};")
        assert classify(node, DEFAULT) is ViolationKind.ARRAY

    def test_nested_conditional(self):
        node = first_expression("a ? b : (c ? d : [1]);")
        assert classify(node, DEFAULT) is ViolationKind.ARRAY

    def test_allowed_branch_falls_through(self):
        node = first_expression("cond ? [1] : {};")
        assert classify(node, RuleOptions(allow_arrays=True)) is ViolationKind.OBJECT

    def test_no_literal_branches(self):
        assert classify(first_expression("cond ? a : b;"), DEFAULT) is None
