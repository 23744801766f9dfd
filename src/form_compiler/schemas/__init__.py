"""Schema IR and compiled descriptor models."""

from form_compiler.schemas.form_schema import (
    BooleanNode,
    ChoiceNode,
    Condition,
    ConditionOperator,
    FieldNode,
    FormSchema,
    Issue,
    NumberNode,
    OptionalNode,
    TextNode,
    extract_show_conditions,
    is_empty,
    strict_equals,
)
from form_compiler.schemas.descriptor import FieldDescriptor, FieldKind, FormState, Option

__all__ = [
    "BooleanNode",
    "ChoiceNode",
    "Condition",
    "ConditionOperator",
    "FieldNode",
    "FormSchema",
    "Issue",
    "NumberNode",
    "OptionalNode",
    "TextNode",
    "extract_show_conditions",
    "is_empty",
    "strict_equals",
    "FieldDescriptor",
    "FieldKind",
    "FormState",
    "Option",
]
