"""
Unit tests for the Schema Compiler.

Tests the core responsibility: turning a flat FormSchema into localized,
deterministic FieldDescriptors.
"""

import logging

from form_compiler.runtime.schema_compiler import capitalize, compile_schema, humanize
from form_compiler.schemas import (
    BooleanNode,
    ChoiceNode,
    Condition,
    FieldKind,
    FormSchema,
    NumberNode,
    OptionalNode,
    TextNode,
)


def _by_name(descriptors):
    return {d.name: d for d in descriptors}


class TestKindInference:
    """Kind and requiredness come from the node variant."""

    def test_leaf_kinds(self, en):
        schema = FormSchema(
            fields={
                "title": TextNode(),
                "age": NumberNode(),
                "subscribed": BooleanNode(),
                "color": ChoiceNode(options=["red", "blue"]),
            }
        )
        descriptors = _by_name(compile_schema(schema, en))

        assert descriptors["title"].kind is FieldKind.TEXT
        assert descriptors["age"].kind is FieldKind.NUMBER
        assert descriptors["subscribed"].kind is FieldKind.BOOLEAN
        assert descriptors["color"].kind is FieldKind.CHOICE
        assert all(d.required for d in descriptors.values())

    def test_optional_is_unwrapped_one_level(self, en):
        schema = FormSchema(fields={"age": NumberNode().optional(), "color": ChoiceNode(options=["red"]).optional()})
        descriptors = _by_name(compile_schema(schema, en))

        assert descriptors["age"].kind is FieldKind.NUMBER
        assert descriptors["age"].required is False
        assert descriptors["color"].kind is FieldKind.CHOICE
        assert descriptors["color"].options[0].value == "red"

    def test_field_order_is_declaration_order(self, signup_schema, en):
        names = [d.name for d in compile_schema(signup_schema, en)]
        assert names == list(signup_schema.fields)

    def test_secret_detection(self, signup_schema, en):
        descriptors = _by_name(compile_schema(signup_schema, en))

        assert descriptors["password"].secret is True
        assert descriptors["repeatPassword"].secret is True
        assert descriptors["name"].secret is False


class TestLocalizedText:
    """Labels, placeholders, descriptions and option labels."""

    def test_labels_follow_locale(self, signup_schema, en, fr):
        assert _by_name(compile_schema(signup_schema, en))["name"].label == "Name"
        assert _by_name(compile_schema(signup_schema, fr))["name"].label == "Nom"

    def test_placeholder_and_description(self, signup_schema, en):
        descriptors = _by_name(compile_schema(signup_schema, en))

        assert descriptors["name"].placeholder == "Enter your full name"
        assert descriptors["notifications"].description == "Receive notifications by email"
        # No translation -> nothing shown
        assert descriptors["country"].placeholder is None
        assert descriptors["name"].description is None

    def test_label_falls_back_to_humanized_name(self, en):
        schema = FormSchema(fields={"homeAddress": TextNode()})
        (descriptor,) = compile_schema(schema, en)
        assert descriptor.label == "Home address"

    def test_choice_options_in_declaration_order(self, signup_schema, en):
        country = _by_name(compile_schema(signup_schema, en))["country"]

        assert [o.value for o in country.options] == ["us", "ca", "uk", "fr", "de"]
        assert [o.label for o in country.options] == [
            "United States",
            "Canada",
            "United Kingdom",
            "France",
            "Germany",
        ]

    def test_option_label_fallback_is_capitalized(self, en):
        schema = FormSchema(fields={"color": ChoiceNode(options=["red", "dark-blue", 3])})
        (descriptor,) = compile_schema(schema, en)

        assert [o.label for o in descriptor.options] == ["Red", "Dark-blue", "3"]

    def test_plain_callable_translator(self):
        """A translator without get() still compiles; optional texts are absent."""
        schema = FormSchema(fields={"firstName": TextNode()})
        (descriptor,) = compile_schema(schema, lambda key, default=None, values=None: default or key)

        assert descriptor.label == "First name"
        assert descriptor.placeholder is None


class TestVisibilityRuleExtraction:
    """showConditions metadata becomes the descriptor's visibility rule."""

    def test_conditions_read_from_inner_node(self, signup_schema, en):
        phone = _by_name(compile_schema(signup_schema, en))["phoneNumber"]

        assert phone.visibility_rule == (Condition(field="country", operator="equals", value="us"),)
        assert phone.depends_on == frozenset({"country"})

    def test_wrapper_conditions_take_precedence(self, en):
        inner = TextNode(meta={"showConditions": [{"field": "a", "operator": "isTrue"}]})
        node = OptionalNode(inner=inner, meta={"showConditions": [{"field": "b", "operator": "isFalse"}]})
        schema = FormSchema(fields={"a": BooleanNode(), "b": BooleanNode(), "c": node})

        c = _by_name(compile_schema(schema, en))["c"]
        assert [cond.field for cond in c.visibility_rule] == ["b"]

    def test_no_metadata_means_always_visible(self, en):
        schema = FormSchema(fields={"a": TextNode(meta={"label": "unrelated"})})
        (descriptor,) = compile_schema(schema, en)

        assert descriptor.visibility_rule == ()
        assert descriptor.depends_on == frozenset()

    def test_dangling_reference_is_dropped(self, en, caplog):
        caplog.set_level(logging.WARNING)
        schema = FormSchema(
            fields={
                "a": BooleanNode(),
                "b": TextNode().with_conditions(
                    {"field": "missing", "operator": "isTrue"},
                    {"field": "a", "operator": "isTrue"},
                ),
            }
        )
        b = _by_name(compile_schema(schema, en))["b"]

        assert [c.field for c in b.visibility_rule] == ["a"]
        assert "unknown field 'missing'" in caplog.text

    def test_unknown_operator_is_kept_and_logged(self, en, caplog):
        caplog.set_level(logging.WARNING)
        schema = FormSchema(
            fields={
                "a": TextNode(),
                "b": TextNode().with_conditions({"field": "a", "operator": "startsWith", "value": "x"}),
            }
        )
        b = _by_name(compile_schema(schema, en))["b"]

        assert b.visibility_rule[0].operator == "startsWith"
        assert "unknown visibility operator 'startsWith'" in caplog.text


class TestDeterminism:
    """Same schema and locale always give the same descriptors."""

    def test_compile_twice_is_identical(self, signup_schema, en):
        assert compile_schema(signup_schema, en) == compile_schema(signup_schema, en)

    def test_locale_round_trip(self, signup_schema, en, fr):
        first = compile_schema(signup_schema, en)
        french = compile_schema(signup_schema, fr)
        back = compile_schema(signup_schema, en)

        assert french != first
        assert back == first


class TestHelpers:

    def test_humanize(self):
        assert humanize("repeatPassword") == "Repeat password"
        assert humanize("phone_number") == "Phone number"
        assert humanize("Name") == "Name"
        assert humanize("email") == "Email"

    def test_capitalize(self):
        assert capitalize("prefer-not-to-say") == "Prefer-not-to-say"
        assert capitalize(42) == "42"
