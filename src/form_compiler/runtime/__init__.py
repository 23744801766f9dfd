"""
Runtime components for schema-driven forms.

1. Schema Compiler - schema_compiler (FormSchema -> FieldDescriptor list)
2. Visibility Evaluator - visibility (conditions -> shown / hidden)
3. Form Session - form_session (values, errors, visibility, submit)
4. Presentation - widget_factory, streamlit_app (not imported here)
"""

from form_compiler.runtime.form_session import FormSession, UnknownFieldError
from form_compiler.runtime.schema_compiler import compile_schema, humanize
from form_compiler.runtime.schema_loader import SchemaLoadError, load_schema, parse_schema
from form_compiler.runtime.visibility import (
    build_dependents,
    compute_visible,
    dependency_set,
    evaluate_condition,
    is_visible,
)

__all__ = [
    "FormSession",
    "UnknownFieldError",
    "compile_schema",
    "humanize",
    "SchemaLoadError",
    "load_schema",
    "parse_schema",
    "build_dependents",
    "compute_visible",
    "dependency_set",
    "evaluate_condition",
    "is_visible",
]
