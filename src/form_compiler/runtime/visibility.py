"""
Deterministic visibility evaluator for form fields.

A field's visibility rule is a list of conditions combined with AND; an
empty rule means the field is always shown. Hidden fields keep their value,
so conditions that read a hidden field see its last-known value.
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Sequence, Set

from form_compiler.schemas.descriptor import FieldDescriptor
from form_compiler.schemas.form_schema import Condition, ConditionOperator, strict_equals

logger = logging.getLogger(__name__)


def is_visible(rule: Sequence[Condition], values: Mapping[str, Any]) -> bool:
    """Determine if a field with the given rule is shown for these values.

    Args:
        rule: Visibility conditions (AND logic); empty means always visible.
        values: Current form values keyed by field name.

    Returns:
        True if every condition holds.
    """
    return all(evaluate_condition(condition, values) for condition in rule)


def evaluate_condition(condition: Condition, values: Mapping[str, Any]) -> bool:
    """Evaluate a single condition against the current values.

    Unknown operators are treated as satisfied so that a schema written for
    a newer evaluator still renders; the compiler logs them as warnings.
    """
    field_value = values.get(condition.field)
    expected = condition.value
    operator = condition.operator

    if operator == ConditionOperator.EQUALS.value:
        return strict_equals(field_value, expected)
    if operator == ConditionOperator.NOT_EQUALS.value:
        return not strict_equals(field_value, expected)
    if operator == ConditionOperator.CONTAINS.value:
        return isinstance(field_value, str) and str(expected) in field_value
    if operator == ConditionOperator.NOT_CONTAINS.value:
        return isinstance(field_value, str) and str(expected) not in field_value
    if operator == ConditionOperator.IS_TRUE.value:
        return field_value is True
    if operator == ConditionOperator.IS_FALSE.value:
        return field_value is False

    logger.debug("Unknown operator '%s' on '%s' treated as satisfied", operator, condition.field)
    return True


def dependency_set(rule: Iterable[Condition]) -> FrozenSet[str]:
    """Names of the fields a visibility rule reads."""
    return frozenset(condition.field for condition in rule)


def build_dependents(descriptors: Iterable[FieldDescriptor]) -> Dict[str, FrozenSet[str]]:
    """Reverse index: field name -> names of fields whose visibility reads it."""
    dependents: Dict[str, Set[str]] = {}
    for descriptor in descriptors:
        for name in descriptor.depends_on:
            dependents.setdefault(name, set()).add(descriptor.name)
    return {name: frozenset(names) for name, names in dependents.items()}


def compute_visible(
    descriptors: Iterable[FieldDescriptor], values: Mapping[str, Any]
) -> FrozenSet[str]:
    """Names of all fields currently shown."""
    return frozenset(d.name for d in descriptors if is_visible(d.visibility_rule, values))
