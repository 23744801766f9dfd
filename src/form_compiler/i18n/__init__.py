"""Localization: per-locale message catalogs and the Translator callable."""

from form_compiler.i18n.translator import (
    CATALOGS,
    DEFAULT_LOCALE,
    Translator,
    available_locales,
    get_translator,
    interpolate,
)

__all__ = [
    "CATALOGS",
    "DEFAULT_LOCALE",
    "Translator",
    "available_locales",
    "get_translator",
    "interpolate",
]
