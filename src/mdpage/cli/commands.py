"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpage.config import Settings, load_config
from mdpage.core.errors import PageError
from mdpage.core.export import render_html
from mdpage.core.pipeline import build_page, run_build
from mdpage.core.render import make_parser
from mdpage.logging import configure_logging


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
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable debug logging")] = None,
    log_json: Annotated[Optional[bool], typer.Option("--log-json", help="Emit JSON log lines")] = None,
    ):
    """Render front-matter markdown posts into pages."""
    settings = _settings(overrides={"verbose": verbose, "log_json": log_json})
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Content file to render")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the page model as JSON instead of HTML")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render a single document to stdout."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        page = build_page(Path(path), settings)
    except PageError as e:
        _fail(str(e))
    if as_json:
        typer.echo(page.model_dump_json(indent=2))
    else:
        typer.echo(render_html(page, make_parser(settings.parser_config)), nl=False)


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to build")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Build HTML + sidecar JSON for every content file under path."""
    settings = _settings(overrides={"output_dir": out, "parser_config": parser})
    output_dir = Path(settings.output_dir)
    try:
        results = run_build(path, output_dir, settings)
    except PageError as e:
        _fail(str(e))
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Built {len(results)} page(s) in {output_dir}/")
