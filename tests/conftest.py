"""
Pytest fixtures and configuration for form_compiler tests.
Provides the sign-up schema, translators and session factories.
"""

from pathlib import Path

import pytest

from form_compiler.demo import SIGNUP_DEFAULTS, build_signup_schema
from form_compiler.i18n import get_translator
from form_compiler.runtime.form_session import FormSession

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def signup_schema_path():
    return FIXTURES_DIR / "signup_form.yaml"


@pytest.fixture
def signup_schema():
    return build_signup_schema()


@pytest.fixture
def en():
    return get_translator("en")


@pytest.fixture
def fr():
    return get_translator("fr")


@pytest.fixture
def make_session(signup_schema, en):
    """Factory for sign-up sessions; keyword overrides go to FormSession."""

    def _make(**kwargs):
        kwargs.setdefault("defaults", SIGNUP_DEFAULTS)
        return FormSession(signup_schema, kwargs.pop("translate", en), **kwargs)

    return _make
