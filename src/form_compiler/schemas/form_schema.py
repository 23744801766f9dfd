"""
Form schema definition: a tagged-variant IR for declarative forms.

Each top-level entry of a FormSchema is one field node:

    string   -> TextNode
    number   -> NumberNode
    boolean  -> BooleanNode
    enum     -> ChoiceNode
    optional -> OptionalNode (wraps exactly one leaf node)

Nodes carry their own field-local validation (length, pattern, bounds,
membership) and an arbitrary metadata bag. Visibility conditions are read
from ``meta["showConditions"]`` once, when the node is built, and stored on
``show_conditions``; the metadata is not read again at render time.

Nested object nodes are not supported: schemas must be flat.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from form_compiler.rules.cross_field import CrossFieldRule
from form_compiler.rules.validators import strict_equals

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ConditionOperator(str, Enum):
    """Operators understood by the visibility evaluator."""

    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    IS_TRUE = "isTrue"
    IS_FALSE = "isFalse"


# Legacy spellings still found in older schema files
OPERATOR_ALIASES = {
    "true": ConditionOperator.IS_TRUE.value,
    "false": ConditionOperator.IS_FALSE.value,
}


class Condition(BaseModel):
    """Single visibility test: compare another field's value to a literal.

    The operator is kept as a plain string so that operators this version does
    not know about survive loading; the evaluator treats them as satisfied.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., min_length=1, description="Name of the field to read")
    operator: str = Field(..., description="One of ConditionOperator values")
    value: Any = Field(default=None, description="Literal to compare against")

    @field_validator("operator", mode="before")
    @classmethod
    def normalize_operator(cls, v: Any) -> str:
        if isinstance(v, ConditionOperator):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"operator must be a string, got {type(v).__name__}")
        return OPERATOR_ALIASES.get(v, v)

    @property
    def is_known_operator(self) -> bool:
        return self.operator in {op.value for op in ConditionOperator}


@dataclass(frozen=True)
class Issue:
    """Field-local validation failure: a message key plus placeholder values."""

    code: str
    message: str
    values: Dict[str, Any] = field(default_factory=dict)


DEFAULT_MESSAGES = {
    "required": "error.required",
    "invalid": "error.invalid",
    "min_length": "error.string.min",
    "max_length": "error.string.max",
    "length": "error.string.length",
    "pattern": "error.invalid",
    "email": "error.email.invalid",
    "number": "error.number.invalid",
    "integer": "error.number.integer",
    "minimum": "error.number.min",
    "maximum": "error.number.max",
    "must_be_true": "error.invalid",
    "enum": "error.invalid",
}


def is_empty(value: Any) -> bool:
    """A value counts as empty when nothing was entered."""
    return value is None or (isinstance(value, str) and value == "")


def extract_show_conditions(meta: Any) -> List[Condition]:
    """
    Read ``showConditions`` from a metadata bag.

    Never raises: a missing bag or key yields no conditions, and malformed
    metadata is logged and treated as "always visible".

    Args:
        meta: Metadata attached to a field node (normally a dict)

    Returns:
        List of parsed conditions (empty when absent or unparsable)
    """
    if meta is None:
        return []
    if not isinstance(meta, dict):
        logger.warning(
            "Ignoring field metadata of type %s (expected a mapping)", type(meta).__name__
        )
        return []

    raw = meta.get("showConditions")
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.warning("Ignoring showConditions: expected a list, got %s", type(raw).__name__)
        return []

    try:
        return [c if isinstance(c, Condition) else Condition.model_validate(c) for c in raw]
    except ValidationError as e:
        logger.warning("Ignoring unparsable showConditions %r: %s", raw, e)
        return []


class _NodeBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    meta: Any = Field(default=None, description="Free-form metadata bag")
    show_conditions: List[Condition] = Field(
        default_factory=list,
        description="Visibility rule (AND of conditions); empty means always visible",
    )

    @model_validator(mode="after")
    def extract_conditions_from_meta(self):
        if not self.show_conditions and self.meta is not None:
            self.show_conditions = extract_show_conditions(self.meta)
        return self

    def with_conditions(self, *conditions: Union[Condition, Dict[str, Any]]):
        """Return a copy whose visibility rule is the given conditions."""
        parsed = [c if isinstance(c, Condition) else Condition.model_validate(c) for c in conditions]
        return self.model_copy(update={"show_conditions": parsed})


class _LeafNode(_NodeBase):
    messages: Dict[str, str] = Field(
        default_factory=dict,
        description="Check name -> message key (or literal text) overrides",
    )

    def message_for(self, code: str) -> str:
        return self.messages.get(code) or DEFAULT_MESSAGES.get(code, "error.invalid")

    def issue(self, code: str, **values: Any) -> Issue:
        return Issue(code=code, message=self.message_for(code), values=values)

    def optional(self) -> "OptionalNode":
        return OptionalNode(inner=self)

    def check(self, value: Any) -> Optional[Issue]:
        """Validate a non-empty value.

        Every concrete leaf node overrides this with its own checks.
        """
        raise NotImplementedError

    def validate_value(self, value: Any) -> Optional[Issue]:
        """Validate a value for a required field."""
        if is_empty(value):
            return self.issue("required")
        return self.check(value)


class TextNode(_LeafNode):
    """Free-text field with optional length, pattern and email checks."""

    type: Literal["string"] = "string"
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    length: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[str] = None
    format: Optional[Literal["email"]] = None

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Validate that pattern is a valid regex."""
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern '{v}': {e}")
        return v

    def check(self, value: Any) -> Optional[Issue]:
        if not isinstance(value, str):
            return self.issue("invalid")
        if self.length is not None and len(value) != self.length:
            return self.issue("length", length=self.length)
        if self.min_length is not None and len(value) < self.min_length:
            return self.issue("min_length", min=self.min_length)
        if self.max_length is not None and len(value) > self.max_length:
            return self.issue("max_length", max=self.max_length)
        if self.format == "email" and not EMAIL_PATTERN.match(value):
            return self.issue("email")
        if self.pattern is not None and not re.search(self.pattern, value):
            return self.issue("pattern")
        return None


class NumberNode(_LeafNode):
    """Numeric field. Numeric strings are accepted since text widgets emit strings."""

    type: Literal["number"] = "number"
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    integer: bool = False

    def check(self, value: Any) -> Optional[Issue]:
        if isinstance(value, bool):
            return self.issue("number")
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return self.issue("number")
        if not isinstance(value, (int, float)):
            return self.issue("number")
        if not math.isfinite(value):
            return self.issue("number")
        if self.integer and not float(value).is_integer():
            return self.issue("integer")
        if self.minimum is not None and value < self.minimum:
            return self.issue("minimum", min=self.minimum)
        if self.maximum is not None and value > self.maximum:
            return self.issue("maximum", max=self.maximum)
        return None


class BooleanNode(_LeafNode):
    """On/off field; ``must_be_true`` models an acceptance checkbox."""

    type: Literal["boolean"] = "boolean"
    must_be_true: bool = False

    def check(self, value: Any) -> Optional[Issue]:
        if not isinstance(value, bool):
            return self.issue("invalid")
        if self.must_be_true and value is not True:
            return self.issue("must_be_true")
        return None


class ChoiceNode(_LeafNode):
    """Single choice among an ordered list of literals."""

    type: Literal["enum"] = "enum"
    options: List[Union[str, int]] = Field(..., min_length=1)

    def check(self, value: Any) -> Optional[Issue]:
        if not any(strict_equals(value, option) for option in self.options):
            return self.issue("enum")
        return None


LeafNode = Annotated[
    Union[TextNode, NumberNode, BooleanNode, ChoiceNode],
    Field(discriminator="type"),
]


class OptionalNode(_NodeBase):
    """Wrapper marking its inner node as not required."""

    type: Literal["optional"] = "optional"
    inner: LeafNode

    def validate_value(self, value: Any) -> Optional[Issue]:
        if is_empty(value):
            return None
        return self.inner.check(value)


FieldNode = Annotated[
    Union[TextNode, NumberNode, BooleanNode, ChoiceNode, OptionalNode],
    Field(discriminator="type"),
]


class FormSchema(BaseModel):
    """Flat, ordered set of named fields plus whole-form refinement rules."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    fields: Dict[str, FieldNode] = Field(..., description="Field name -> node, in display order")
    rules: List[CrossFieldRule] = Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if not v:
            raise ValueError("Schema must declare at least one field")
        return v

    @model_validator(mode="after")
    def validate_rule_references(self):
        """Every field a rule reads or reports on must be declared."""
        for rule in self.rules:
            missing = sorted(rule.fields - set(self.fields))
            if missing:
                raise ValueError(f"Rule '{rule.name}' references unknown fields: {missing}")
        return self
