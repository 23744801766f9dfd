"""Tests for FormConfig and load_config."""

import pytest

from form_compiler.config import ConfigError, FormConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any .env file."""
    monkeypatch.delenv("FORM_COMPILER_LOCALE", raising=False)
    monkeypatch.delenv("FORM_COMPILER_HIDDEN_VALUES", raising=False)
    monkeypatch.chdir(tmp_path)


class TestFormConfig:

    def test_defaults(self):
        config = FormConfig()

        assert config.default_locale == "en"
        assert config.fallback_locale == "en"
        assert config.radio_threshold == 3
        assert config.hidden_values == "preserve"

    def test_unknown_locale_rejected(self):
        with pytest.raises(ValueError, match="Unknown locale"):
            FormConfig(default_locale="xx")

    def test_invalid_hidden_values(self):
        with pytest.raises(ValueError):
            FormConfig(hidden_values="erase")


class TestLoadConfig:

    def test_no_file(self):
        assert load_config() == FormConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "form.yaml"
        path.write_text("default_locale: fr\nradio_threshold: 5\n", encoding="utf-8")
        config = load_config(path)

        assert config.default_locale == "fr"
        assert config.radio_threshold == 5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "form.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == FormConfig()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "form.yaml"
        path.write_text("default_locale: en\n", encoding="utf-8")
        monkeypatch.setenv("FORM_COMPILER_LOCALE", "fr")
        monkeypatch.setenv("FORM_COMPILER_HIDDEN_VALUES", "drop")

        config = load_config(path)

        assert config.default_locale == "fr"
        assert config.hidden_values == "drop"

    def test_env_ignored_when_disabled(self, monkeypatch):
        monkeypatch.setenv("FORM_COMPILER_LOCALE", "fr")
        assert load_config(use_env=False).default_locale == "en"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "form.yaml"
        path.write_text("- en\n- fr\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "form.yaml"
        path.write_text("radio_threshold: -1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)
