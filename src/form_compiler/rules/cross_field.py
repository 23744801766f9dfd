"""
Cross-field validation rules.

A cross-field rule inspects the whole value map but reports its error on a
single target field (``path``) so the user sees the message next to the input
they are expected to fix.

Rules declare which fields they read (``triggers``). The form session uses
that set to decide which rules to re-run after an edit; ``revalidate`` lists
fields whose error slot must be refreshed whenever the rule runs, even though
their own value did not change (e.g. a field that only becomes mandatory when
another field takes a given value).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Mapping, Union

from form_compiler.rules.validators import (
    PASSWORD_LENGTH,
    VALUE_CHECKS,
    ValueCheck,
    strict_equals,
)


class RuleSpecError(ValueError):
    """Raised when a rule declaration in a schema file cannot be built."""
    pass


@dataclass(frozen=True)
class CrossFieldRule:
    """Whole-schema refinement with a designated error target."""

    name: str
    predicate: Callable[[Mapping[str, Any]], bool]
    message: Callable[[Callable[..., str]], str]
    path: str
    triggers: FrozenSet[str]
    revalidate: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def fields(self) -> FrozenSet[str]:
        """Every field name this rule reads or reports on."""
        return self.triggers | {self.path} | self.revalidate

    def check(self, values: Mapping[str, Any]) -> bool:
        return bool(self.predicate(values))


def password_strength(primary: str, confirmation: str) -> CrossFieldRule:
    """Primary secret must meet the minimum length; error shown on the confirmation."""

    def _predicate(values: Mapping[str, Any]) -> bool:
        return PASSWORD_LENGTH(values.get(primary))

    return CrossFieldRule(
        name="password_strength",
        predicate=_predicate,
        message=PASSWORD_LENGTH.err_message,
        path=confirmation,
        triggers=frozenset({primary}),
    )


def password_match(primary: str, confirmation: str) -> CrossFieldRule:
    """Confirmation must repeat the primary secret exactly."""

    def _predicate(values: Mapping[str, Any]) -> bool:
        return values.get(primary) == values.get(confirmation)

    return CrossFieldRule(
        name="password_match",
        predicate=_predicate,
        message=lambda t: t("error.password.match"),
        path=confirmation,
        triggers=frozenset({primary, confirmation}),
    )


def conditional_format(
    trigger: str,
    equals: Any,
    target: str,
    check: Union[ValueCheck, str],
) -> CrossFieldRule:
    """
    Require ``target`` to satisfy ``check`` while ``trigger`` equals a value.

    Args:
        trigger: Field whose value switches the requirement on
        equals: Trigger value that makes the target mandatory
        target: Field that must satisfy the check (and receives the error)
        check: A ValueCheck or the name of a registered one

    Returns:
        CrossFieldRule that is trivially valid when the trigger does not match
    """
    if isinstance(check, str):
        if check not in VALUE_CHECKS:
            raise RuleSpecError(
                f"Unknown check '{check}'. Valid checks: {sorted(VALUE_CHECKS)}"
            )
        check = VALUE_CHECKS[check]

    def _predicate(values: Mapping[str, Any]) -> bool:
        if not strict_equals(values.get(trigger), equals):
            return True
        return check(values.get(target))

    return CrossFieldRule(
        name=f"conditional_{check.name}",
        predicate=_predicate,
        message=check.err_message,
        path=target,
        triggers=frozenset({trigger, target}),
        revalidate=frozenset({target}),
    )


RULE_BUILDERS: Dict[str, Callable[..., CrossFieldRule]] = {
    "password_strength": password_strength,
    "password_match": password_match,
    "conditional_format": conditional_format,
}


def build_rule(entry: Mapping[str, Any]) -> CrossFieldRule:
    """
    Build a rule from its declarative form, e.g.::

        {"type": "conditional_format", "trigger": "country", "equals": "us",
         "target": "phoneNumber", "check": "phone_number"}

    Raises:
        RuleSpecError: If the rule type is unknown or its parameters are wrong
    """
    if not isinstance(entry, Mapping):
        raise RuleSpecError(f"Rule entry must be a mapping, got {type(entry).__name__}")

    params = dict(entry)
    rule_type = params.pop("type", None)
    builder = RULE_BUILDERS.get(rule_type)
    if builder is None:
        raise RuleSpecError(
            f"Unknown rule type '{rule_type}'. Valid types: {sorted(RULE_BUILDERS)}"
        )

    try:
        return builder(**params)
    except TypeError as e:
        raise RuleSpecError(f"Invalid parameters for rule '{rule_type}': {e}") from e
