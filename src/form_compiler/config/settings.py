"""Form runtime configuration schema and loader.

Configuration is read from an optional YAML file and then overridden by
environment variables (a ``.env`` file in the working directory is loaded
first):

    FORM_COMPILER_LOCALE          -> default_locale
    FORM_COMPILER_HIDDEN_VALUES   -> hidden_values
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from form_compiler.i18n import available_locales

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "FORM_COMPILER_LOCALE": "default_locale",
    "FORM_COMPILER_HIDDEN_VALUES": "hidden_values",
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded or is invalid."""
    pass


class FormConfig(BaseModel):
    """Settings shared by form sessions, the CLI and the demo app.

    Attributes:
        default_locale: Locale used when none is requested explicitly.
        fallback_locale: Catalog consulted when a key is missing.
        radio_threshold: Choice fields with at most this many options render as radios.
        hidden_values: "preserve" submits hidden fields' last values, "drop" omits them.
    """

    default_locale: str = Field(default="en", description="Initial locale")
    fallback_locale: str = Field(default="en", description="Locale for missing keys")
    radio_threshold: int = Field(
        default=3,
        ge=0,
        description="Max option count rendered as a radio group instead of a select",
    )
    hidden_values: Literal["preserve", "drop"] = Field(
        default="preserve",
        description="Whether hidden fields are part of the submitted payload",
    )

    @field_validator("default_locale", "fallback_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate that the locale has a bundled catalog."""
        if v not in available_locales():
            raise ValueError(f"Unknown locale '{v}'. Available: {available_locales()}")
        return v


def load_config(path: Optional[Path] = None, *, use_env: bool = True) -> FormConfig:
    """Load configuration from YAML (optional) and environment overrides.

    Args:
        path: Path to a YAML file. None uses defaults only.
        use_env: Apply FORM_COMPILER_* environment overrides.

    Returns:
        Validated FormConfig.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or fails validation.
    """
    data: Dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")

    if use_env:
        load_dotenv()
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                logger.debug("Config override from %s", env_name)
                data[key] = value

    try:
        return FormConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
