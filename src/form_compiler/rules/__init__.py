"""Rule predicates: single-value checks and cross-field validation rules."""

from form_compiler.rules.validators import (
    PASSWORD_LENGTH,
    PHONE_NUMBER,
    VALUE_CHECKS,
    ValueCheck,
    strict_equals,
)
from form_compiler.rules.cross_field import (
    RULE_BUILDERS,
    CrossFieldRule,
    RuleSpecError,
    build_rule,
    conditional_format,
    password_match,
    password_strength,
)

__all__ = [
    "PASSWORD_LENGTH",
    "PHONE_NUMBER",
    "VALUE_CHECKS",
    "ValueCheck",
    "strict_equals",
    "RULE_BUILDERS",
    "CrossFieldRule",
    "RuleSpecError",
    "build_rule",
    "conditional_format",
    "password_match",
    "password_strength",
]
