"""Compiled, renderer-agnostic field descriptors and form state snapshots."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, NamedTuple, Optional, Tuple, Union

from form_compiler.schemas.form_schema import Condition


class FieldKind(str, Enum):
    """Render kind inferred from a field's declared type."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CHOICE = "choice"


class Option(NamedTuple):
    """One entry of a choice field: localized label and raw value."""

    label: str
    value: Union[str, int]


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Description of one form field for a given (schema, locale) pair.

    Attributes:
        name: Field key, unique within the schema
        kind: Render kind (text, number, boolean, choice)
        required: False only when the field is declared optional
        label: Localized label (humanized field name when untranslated)
        placeholder: Localized placeholder, None when no translation exists
        description: Localized help text, None when no translation exists
        options: Ordered (label, value) pairs, only for choice fields
        visibility_rule: Conditions that must all hold for the field to show
        depends_on: Field names read by the visibility rule
        secret: Value should be masked when displayed
    """

    name: str
    kind: FieldKind
    required: bool
    label: str
    placeholder: Optional[str] = None
    description: Optional[str] = None
    options: Optional[Tuple[Option, ...]] = None
    visibility_rule: Tuple[Condition, ...] = ()
    depends_on: FrozenSet[str] = field(default_factory=frozenset)
    secret: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "required": self.required,
            "label": self.label,
            "placeholder": self.placeholder,
            "description": self.description,
            "options": (
                [{"label": o.label, "value": o.value} for o in self.options]
                if self.options is not None
                else None
            ),
            "visibility_rule": [c.model_dump() for c in self.visibility_rule],
            "secret": self.secret,
        }


@dataclass(frozen=True)
class FormState:
    """Immutable snapshot of a form session after a transition."""

    values: Mapping[str, Any]
    errors: Mapping[str, str]
    visible: FrozenSet[str]
    is_valid: bool
