"""
Form Compiler - render forms from declarative validation schemas

This package provides:
- schemas: tagged-variant field IR and compiled descriptors
- rules: single-value checks and cross-field validation rules
- runtime: schema compiler, visibility evaluator and form session
- i18n: locale catalogs and translator
"""

__version__ = "0.1.0"

# Export commonly used classes for convenience
from form_compiler.i18n import Translator, get_translator
from form_compiler.runtime import (
    FormSession,
    compile_schema,
    is_visible,
    load_schema,
    parse_schema,
)
from form_compiler.schemas import FieldDescriptor, FieldKind, FormSchema

__all__ = [
    "Translator",
    "get_translator",
    "FormSession",
    "compile_schema",
    "is_visible",
    "load_schema",
    "parse_schema",
    "FieldDescriptor",
    "FieldKind",
    "FormSchema",
]
