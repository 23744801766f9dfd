"""Configuration for form sessions and entry points."""

from form_compiler.config.settings import ConfigError, FormConfig, load_config

__all__ = ["ConfigError", "FormConfig", "load_config"]
