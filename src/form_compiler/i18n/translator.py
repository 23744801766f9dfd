from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Set

from form_compiler.i18n.messages_en import MESSAGES as EN
from form_compiler.i18n.messages_fr import MESSAGES as FR

logger = logging.getLogger(__name__)

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": EN,
    "fr": FR,
}

DEFAULT_LOCALE = "en"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class Translator:
    """
    Message lookup bound to one locale.

    - Primary table for the locale, then the fallback table
    - ``{name}`` placeholders substituted from ``values``
    - Missing keys are logged once per translator and never raise
    """

    def __init__(
        self,
        locale: str,
        messages: Mapping[str, str],
        fallback: Optional[Mapping[str, str]] = None,
    ):
        self.locale = locale
        self._messages = messages
        self._fallback = fallback or {}
        self._reported: Set[str] = set()

    def get(self, key: str) -> Optional[str]:
        """Return the raw message for key, or None if neither table has it."""
        message = self._messages.get(key)
        if message is None:
            message = self._fallback.get(key)
        return message

    def __call__(
        self,
        key: str,
        default: Optional[str] = None,
        values: Optional[Mapping[str, Any]] = None,
    ) -> str:
        message = self.get(key)
        if message is None:
            if key not in self._reported:
                self._reported.add(key)
                logger.warning("i18n: missing key '%s' for locale='%s'", key, self.locale)
            message = default if default is not None else key
        if values:
            message = interpolate(message, values)
        return message

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale!r})"


def interpolate(message: str, values: Mapping[str, Any]) -> str:
    """Replace ``{name}`` with values[name]; unknown names are left as-is."""

    def _replace(match: re.Match) -> str:
        value = values.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return _PLACEHOLDER.sub(_replace, message)


def available_locales() -> List[str]:
    return sorted(CATALOGS)


def get_translator(locale: str, fallback_locale: str = DEFAULT_LOCALE) -> Translator:
    """
    Build a translator for a bundled locale.

    Unknown locales log a warning and resolve to the fallback locale.
    Region suffixes are ignored ("fr-CA" -> "fr").
    """
    code = (locale or "").lower().replace("_", "-").split("-")[0]
    fallback = CATALOGS.get(fallback_locale, EN)
    if code not in CATALOGS:
        logger.warning("i18n: unknown locale '%s', using '%s'", locale, fallback_locale)
        return Translator(fallback_locale, fallback)
    return Translator(code, CATALOGS[code], fallback if code != fallback_locale else None)
