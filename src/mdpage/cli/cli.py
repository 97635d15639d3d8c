"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpage.cli.commands import build_cmd, main_callback, render_cmd


app = typer.Typer(name="mdpage", no_args_is_help=True, help="Render front-matter markdown posts into pages")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)
