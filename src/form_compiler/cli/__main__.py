from form_compiler.cli import app

app()
