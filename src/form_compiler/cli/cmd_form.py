"""Form commands - compile a schema and validate values against it."""

from pathlib import Path
from typing import Optional

import typer
import yaml

from form_compiler.cli._app import app
from form_compiler.cli._console import output_table, print_err, print_ok, stdout_console
from form_compiler.config import ConfigError, FormConfig, load_config
from form_compiler.i18n import available_locales, get_translator
from form_compiler.runtime.form_session import FormSession, UnknownFieldError
from form_compiler.runtime.schema_compiler import compile_schema
from form_compiler.runtime.schema_loader import SchemaLoadError, load_schema
from form_compiler.schemas.form_schema import FormSchema


def _load(schema_path: Path, config_path: Optional[Path]) -> tuple[FormSchema, FormConfig]:
    try:
        config = load_config(config_path)
        schema = load_schema(schema_path)
    except (ConfigError, SchemaLoadError) as e:
        print_err(str(e))
        raise SystemExit(2)
    return schema, config


def _format_rule(descriptor) -> str:
    return " and ".join(
        f"{c.field} {c.operator}" + ("" if c.value is None else f" {c.value!r}")
        for c in descriptor.visibility_rule
    )


@app.command("describe", help="Compile a schema and list its fields.")
def describe_cmd(
    ctx: typer.Context,
    schema_path: Path = typer.Argument(..., help="Schema file (YAML or JSON)"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale for labels"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML file"),
):
    """Print the compiled field descriptors."""
    schema, config = _load(schema_path, config_path)
    translate = get_translator(locale or config.default_locale, config.fallback_locale)
    descriptors = compile_schema(schema, translate)

    if ctx.obj["json"]:
        stdout_console.print_json(data=[d.to_dict() for d in descriptors])
        return

    rows = [
        {
            "name": d.name,
            "kind": d.kind.value,
            "required": "yes" if d.required else "no",
            "label": d.label,
            "options": ", ".join(o.label for o in d.options) if d.options else None,
            "visible when": _format_rule(d) or None,
        }
        for d in descriptors
    ]
    output_table(rows, ctx=ctx, title=f"{schema_path.name} ({translate.locale})")


@app.command("validate", help="Check a set of values against a schema.")
def validate_cmd(
    ctx: typer.Context,
    schema_path: Path = typer.Argument(..., help="Schema file (YAML or JSON)"),
    values_path: Path = typer.Argument(..., help="Values file (YAML or JSON mapping)"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale for messages"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML file"),
):
    """Run a form session over the values; exit code 1 when the form is invalid."""
    schema, config = _load(schema_path, config_path)

    try:
        with open(values_path, "r", encoding="utf-8") as f:
            values = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print_err(f"Values file not found: {values_path}")
        raise SystemExit(2)
    except yaml.YAMLError as e:
        print_err(f"Invalid YAML/JSON in values file: {e}")
        raise SystemExit(2)
    if not isinstance(values, dict):
        print_err("Values file must contain a mapping")
        raise SystemExit(2)

    translate = get_translator(locale or config.default_locale, config.fallback_locale)
    session = FormSession(schema, translate, config=config)
    try:
        session.update(values)
    except UnknownFieldError as e:
        print_err(str(e.args[0]))
        raise SystemExit(2)
    session.validate()

    if ctx.obj["json"]:
        stdout_console.print_json(
            data={
                "valid": session.is_valid,
                "visible": [d.name for d in session.visible_descriptors()],
                "errors": session.errors,
            }
        )
    else:
        errors = session.errors
        rows = [
            {"field": d.name, "label": d.label, "error": errors.get(d.name)}
            for d in session.visible_descriptors()
        ]
        output_table(rows, ctx=ctx, title="Visible fields")
        if session.is_valid:
            print_ok("Form is valid")
        else:
            print_err(f"{len(errors)} field(s) invalid")

    if not session.is_valid:
        raise SystemExit(1)


@app.command("locales", help="List bundled locales.")
def locales_cmd(ctx: typer.Context):
    rows = [{"locale": code} for code in available_locales()]
    output_table(rows, ctx=ctx, title="Locales")
