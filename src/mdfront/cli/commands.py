"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdfront.config import Settings, load_config
from mdfront.core.frontmatter.errors import FrontmatterError, format_excerpt
from mdfront.core.parse import parse_file
from mdfront.core.pipeline import process_doc, run_extract, run_lint, run_validate
from mdfront.utils.logging import setup_logger


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Extract YAML frontmatter blocks from markdown documents."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    setup_logger(settings.log_level)


def extract_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to extract from")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    lenient: Annotated[bool, typer.Option("--lenient", help="Log frontmatter problems instead of failing")] = False,
    no_embeds: Annotated[bool, typer.Option("--no-embeds", help="Skip embed detection")] = False,
    ):
    """Recursively extract frontmatter and document trees to JSON."""
    settings = _settings(overrides={
        "output_dir": out, "parser_config": parser,
        "strict": False if lenient else None,
        "detect_embeds": False if no_embeds else None,
    })
    try:
        results = run_extract(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Extracted {len(results)} document(s) to {settings.output_dir}/")


def lint_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Report every ambiguous or invalid frontmatter block without extracting."""
    settings = _settings(overrides={"parser_config": parser})
    found = run_lint(path, settings.parser_config)
    for src, diagnostic in found:
        typer.echo(f"{src}:{diagnostic.line}: {diagnostic.kind.value}: {diagnostic.message}")
        typer.echo(format_excerpt(diagnostic))
    if found:
        typer.echo(f"Found {len(found)} problem(s).", err=True)
        raise typer.Exit(1)
    typer.echo("No frontmatter problems found.")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to extract", exists=True, dir_okay=False)],
    lenient: Annotated[bool, typer.Option("--lenient", help="Log frontmatter problems instead of failing")] = False,
    ):
    """Print the extracted document of a single file as JSON."""
    settings = _settings(overrides={"strict": False if lenient else None})
    try:
        extracted = process_doc(parse_file(path, settings.parser_config), settings)
    except FrontmatterError as e:
        _fail(f"{path}: {e.kind.value}", e)
    typer.echo(extracted.model_dump_json(indent=2))


def validate_cmd(
    path: Annotated[str, typer.Argument(help="Extracted JSON file or directory")],
    strict: Annotated[bool, typer.Option("--strict", help="Disable type coercion")] = False,
    ):
    """Validate extracted JSON files against the output schema."""
    try:
        files = run_validate(path, strict=strict)
    except ValidationError as e:
        _fail("Validation failed", e)
    if not files:
        typer.echo(f"No JSON files found at {path}.")
        raise typer.Exit(1)
    typer.echo(f"Validated {len(files)} file(s).")
