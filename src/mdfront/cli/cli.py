"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdfront.cli.commands import extract_cmd, lint_cmd, main_callback, show_cmd, validate_cmd


app = typer.Typer(name="mdfront", no_args_is_help=True, help="Markdown frontmatter extraction")

app.callback()(main_callback)
app.command(name="extract")(extract_cmd)
app.command(name="lint")(lint_cmd)
app.command(name="show")(show_cmd)
app.command(name="validate")(validate_cmd)
