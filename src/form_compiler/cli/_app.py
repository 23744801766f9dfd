"""Root Typer application: global flags shared by every form command."""

from typing import Optional

import typer

from form_compiler import __version__
from form_compiler.cli._common import setup_logging
from form_compiler.cli._console import stdout_console

app = typer.Typer(
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def _print_version(value: bool) -> None:
    if value:
        stdout_console.print(f"form-compiler {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Warnings and errors only"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON on stdout"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the form-compiler version and exit",
    ),
):
    """Compile declarative form schemas and check form values against them."""
    setup_logging(verbose=verbose, quiet=quiet)
    ctx.ensure_object(dict)
    ctx.obj.update(verbose=verbose, quiet=quiet, json=json_output)
