"""CLI tests for the describe, validate and locales commands."""

import json

import pytest
from typer.testing import CliRunner

from form_compiler.cli import app

runner = CliRunner()


@pytest.fixture
def values_file(tmp_path):
    def _write(text):
        path = tmp_path / "values.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


VALID_VALUES = """\
name: Robin Lebhar
email: robin@lebhar.com
country: fr
gender: male
notifications: false
password: "123456"
repeatPassword: "123456"
terms: true
"""


class TestDescribe:

    def test_json_output(self, signup_schema_path):
        result = runner.invoke(app, ["--json", "--quiet", "describe", str(signup_schema_path)])

        assert result.exit_code == 0
        fields = json.loads(result.stdout)
        assert len(fields) == 11
        assert fields[0]["name"] == "name"
        assert fields[0]["label"] == "Name"

    def test_locale_option(self, signup_schema_path):
        result = runner.invoke(
            app, ["--json", "--quiet", "describe", str(signup_schema_path), "--locale", "fr"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["label"] == "Nom"

    def test_visibility_rule_serialized(self, signup_schema_path):
        result = runner.invoke(app, ["--json", "--quiet", "describe", str(signup_schema_path)])
        phone = next(f for f in json.loads(result.stdout) if f["name"] == "phoneNumber")

        assert phone["required"] is False
        assert phone["visibility_rule"] == [{"field": "country", "operator": "equals", "value": "us"}]

    def test_table_output(self, signup_schema_path):
        result = runner.invoke(app, ["--quiet", "describe", str(signup_schema_path)])

        assert result.exit_code == 0
        assert "Name" in result.stdout

    def test_missing_schema(self, tmp_path):
        result = runner.invoke(app, ["--json", "--quiet", "describe", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2


class TestValidate:

    def test_valid_values(self, signup_schema_path, values_file):
        path = values_file(VALID_VALUES)
        result = runner.invoke(app, ["--json", "--quiet", "validate", str(signup_schema_path), path])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["valid"] is True
        assert report["errors"] == {}
        assert "phoneNumber" not in report["visible"]

    def test_invalid_values(self, signup_schema_path, values_file):
        path = values_file(VALID_VALUES.replace("terms: true", "terms: false"))
        result = runner.invoke(app, ["--json", "--quiet", "validate", str(signup_schema_path), path])

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["valid"] is False
        assert report["errors"] == {"terms": "You must accept the terms"}

    def test_us_requires_phone(self, signup_schema_path, values_file):
        path = values_file(VALID_VALUES.replace("country: fr", "country: us"))
        result = runner.invoke(app, ["--json", "--quiet", "validate", str(signup_schema_path), path])

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert "phoneNumber" in report["visible"]
        assert report["errors"] == {"phoneNumber": "Phone number must be exactly 10 digits"}

    def test_unknown_field(self, signup_schema_path, values_file):
        path = values_file(VALID_VALUES + "nickname: rob\n")
        result = runner.invoke(app, ["--json", "--quiet", "validate", str(signup_schema_path), path])
        assert result.exit_code == 2

    def test_values_not_a_mapping(self, signup_schema_path, values_file):
        path = values_file("- name\n")
        result = runner.invoke(app, ["--json", "--quiet", "validate", str(signup_schema_path), path])
        assert result.exit_code == 2


class TestGlobalOptions:

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "form-compiler 0.1.0"

    def test_verbose_logging_with_json(self, signup_schema_path):
        result = runner.invoke(app, ["--verbose", "--json", "describe", str(signup_schema_path)])

        assert result.exit_code == 0


class TestLocales:

    def test_lists_bundled_locales(self):
        result = runner.invoke(app, ["--json", "locales"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"locale": "en"}, {"locale": "fr"}]
