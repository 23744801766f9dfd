"""Tests for locale catalogs and the Translator."""

import logging

from form_compiler.i18n import Translator, available_locales, get_translator
from form_compiler.i18n.messages_en import MESSAGES as EN
from form_compiler.i18n.messages_fr import MESSAGES as FR
from form_compiler.i18n.translator import interpolate


class TestCatalogs:

    def test_bundled_locales(self):
        assert available_locales() == ["en", "fr"]

    def test_catalogs_share_keys(self):
        assert set(EN) == set(FR)


class TestTranslator:

    def test_lookup(self):
        assert get_translator("en")("field.name") == "Name"
        assert get_translator("fr")("field.name") == "Nom"

    def test_interpolation(self):
        t = get_translator("en")
        assert t("error.string.min", values={"min": 3}) == "Must be at least 3 characters"

    def test_missing_key_returns_default_or_key(self, caplog):
        caplog.set_level(logging.WARNING)
        t = get_translator("en")

        assert t("field.nickname", default="Nickname") == "Nickname"
        assert t("field.nickname") == "field.nickname"
        # Reported once per key
        assert caplog.text.count("field.nickname") == 1

    def test_get_is_silent(self, caplog):
        caplog.set_level(logging.WARNING)
        assert get_translator("en").get("field.name.description") is None
        assert caplog.text == ""

    def test_fallback_table(self):
        t = Translator("de", {"field.name": "Name (de)"}, fallback={"field.email": "Email"})

        assert t("field.name") == "Name (de)"
        assert t("field.email") == "Email"

    def test_region_suffix_is_ignored(self):
        assert get_translator("fr-CA").locale == "fr"
        assert get_translator("en_GB").locale == "en"

    def test_unknown_locale_falls_back(self, caplog):
        caplog.set_level(logging.WARNING)
        t = get_translator("es")

        assert t.locale == "en"
        assert t("field.name") == "Name"
        assert "unknown locale 'es'" in caplog.text


class TestInterpolate:

    def test_unknown_placeholder_left_untouched(self):
        assert interpolate("{min} to {max}", {"min": 1}) == "1 to {max}"

    def test_no_placeholders(self):
        assert interpolate("plain", {"min": 1}) == "plain"
