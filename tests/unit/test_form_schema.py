"""Tests for field-local checks on schema nodes."""

import pytest

from form_compiler.schemas import BooleanNode, ChoiceNode, NumberNode, TextNode
from form_compiler.schemas.form_schema import _LeafNode


class TestNumberNode:

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan"), float("inf")])
    def test_non_finite_rejected(self, value):
        issue = NumberNode(minimum=0, maximum=10).check(value)

        assert issue is not None
        assert issue.code == "number"

    @pytest.mark.parametrize("value,code", [(-1, "minimum"), ("11", "maximum"), (True, "number"), ("ten", "number")])
    def test_bounds_and_type(self, value, code):
        assert NumberNode(minimum=0, maximum=10).check(value).code == code

    @pytest.mark.parametrize("value", [0, 10, "5", " 7.5 "])
    def test_accepts_numbers_in_range(self, value):
        assert NumberNode(minimum=0, maximum=10).check(value) is None


class TestLeafNodes:

    @pytest.mark.parametrize("node_cls", [TextNode, NumberNode, BooleanNode, ChoiceNode])
    def test_every_leaf_implements_check(self, node_cls):
        assert node_cls.check is not _LeafNode.check

    def test_required_issue_on_empty(self):
        assert TextNode().validate_value("").code == "required"
        assert BooleanNode().validate_value(None).code == "required"

    def test_issue_uses_message_override(self):
        node = BooleanNode(must_be_true=True, messages={"must_be_true": "error.terms.required"})
        issue = node.check(False)

        assert issue.message == "error.terms.required"
