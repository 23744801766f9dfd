"""
Schema Compiler: turn a FormSchema into localized FieldDescriptors.

Only the top-level entries of the schema become fields. For each entry:

- kind is read from the node variant; an OptionalNode is unwrapped exactly
  one level and marks the field as not required
- the visibility rule comes from the wrapper, or from the inner node when
  the wrapper has none; conditions that reference undeclared fields are
  dropped with a warning (the field is shown rather than the form breaking)
- label, placeholder, description and option labels are resolved through
  the translator, so descriptors must be recompiled when the locale changes

Compilation is deterministic: the same schema and translator give equal
descriptor lists, in declaration order.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple

from form_compiler.schemas.descriptor import FieldDescriptor, FieldKind, Option
from form_compiler.schemas.form_schema import (
    BooleanNode,
    ChoiceNode,
    Condition,
    FormSchema,
    NumberNode,
    OptionalNode,
    TextNode,
)
from form_compiler.runtime.visibility import dependency_set

logger = logging.getLogger(__name__)

_KIND_BY_NODE = {
    TextNode: FieldKind.TEXT,
    NumberNode: FieldKind.NUMBER,
    BooleanNode: FieldKind.BOOLEAN,
    ChoiceNode: FieldKind.CHOICE,
}

_WORD_BOUNDARY = re.compile(r"(?=[A-Z])")

SECRET_MARKER = "password"


def humanize(name: str) -> str:
    """
    Turn a field name into a readable label.

    "repeatPassword" -> "Repeat password", "phone_number" -> "Phone number"
    """
    words = [w for w in _WORD_BOUNDARY.split(name.replace("_", " ")) if w]
    text = " ".join(w.strip() for w in words).lower()
    text = re.sub(r"\s+", " ", text).strip()
    return text[:1].upper() + text[1:]


def capitalize(value: Any) -> str:
    """Fallback option label: first character upper-cased, rest untouched."""
    text = str(value)
    return text[:1].upper() + text[1:]


def compile_schema(schema: FormSchema, translate: Callable[..., str]) -> List[FieldDescriptor]:
    """
    Compile every top-level field of the schema.

    Args:
        schema: Flat form schema
        translate: Translator for the active locale (must offer ``get(key)``
            for optional keys and be callable with ``(key, default=...)``)

    Returns:
        Field descriptors in declaration order
    """
    known = set(schema.fields)
    return [
        _compile_field(name, node, translate, known)
        for name, node in schema.fields.items()
    ]


def _compile_field(name: str, node: Any, translate: Callable[..., str], known: Set[str]) -> FieldDescriptor:
    required = True
    leaf = node
    if isinstance(node, OptionalNode):
        leaf = node.inner
        required = False

    kind = _KIND_BY_NODE[type(leaf)]

    conditions = node.show_conditions
    if not conditions and leaf is not node:
        conditions = leaf.show_conditions
    rule = _resolve_conditions(name, conditions, known)

    options: Optional[Tuple[Option, ...]] = None
    if kind is FieldKind.CHOICE:
        options = tuple(
            Option(
                label=translate(f"{name}.{value}", default=capitalize(value)),
                value=value,
            )
            for value in leaf.options
        )

    return FieldDescriptor(
        name=name,
        kind=kind,
        required=required,
        label=translate(f"field.{name}", default=humanize(name)),
        placeholder=_optional_text(translate, f"field.{name}.placeholder"),
        description=_optional_text(translate, f"field.{name}.description"),
        options=options,
        visibility_rule=rule,
        depends_on=dependency_set(rule),
        secret=SECRET_MARKER in name.lower(),
    )


def _resolve_conditions(
    name: str, conditions: Sequence[Condition], known: Set[str]
) -> Tuple[Condition, ...]:
    resolved = []
    for condition in conditions:
        if condition.field not in known:
            logger.warning(
                "Field '%s': visibility condition references unknown field '%s'; ignoring it",
                name,
                condition.field,
            )
            continue
        if not condition.is_known_operator:
            logger.warning(
                "Field '%s': unknown visibility operator '%s' will always be satisfied",
                name,
                condition.operator,
            )
        resolved.append(condition)
    return tuple(resolved)


def _optional_text(translate: Callable[..., str], key: str) -> Optional[str]:
    getter = getattr(translate, "get", None)
    if getter is None:
        return None
    return getter(key)


def index_descriptors(descriptors: Sequence[FieldDescriptor]) -> Dict[str, FieldDescriptor]:
    return {d.name: d for d in descriptors}
