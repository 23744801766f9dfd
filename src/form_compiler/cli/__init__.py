"""CLI package - Typer-based command-line interface.

Usage:
    python -m form_compiler.cli --help
    form-compiler describe examples/signup_form.yaml --locale fr
"""

from form_compiler.cli._app import app
from form_compiler.cli._common import setup_logging

# Register command modules (side-effect imports)
import form_compiler.cli.cmd_form  # noqa: F401

__all__ = ["app", "setup_logging"]
