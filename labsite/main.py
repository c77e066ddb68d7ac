#!/usr/bin/env python3
"""
Main CLI entry point for labsite
"""

from pathlib import Path
from typing import Optional

import typer

from labsite import __version__
from labsite.commands import gallery, publications, theme
from labsite.commands.news import news
from labsite.config.settings import collect_env_var_errors, get_debounce_ms
from labsite.exceptions import LabsiteError
from labsite.utils.logging import setup_cli_logging
from labsite.utils.output import console

app = typer.Typer(
    help="labsite - browse a research lab's publications, gallery and news",
    no_args_is_help=True,
)
app.add_typer(publications.app, name="pubs")
app.add_typer(gallery.app, name="gallery")
app.add_typer(theme.app, name="theme")
app.command()(news)


@app.callback()
def main(
    ctx: typer.Context,
    content_dir: Optional[Path] = typer.Option(
        None,
        "--content-dir",
        "-d",
        envvar="LABSITE_CONTENT_DIR",
        help="Directory holding publications.json, media.json and news.json",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    labsite - Research lab content browser

    [bold]Examples:[/bold]

    Browse interactively:
        [cyan]labsite browse[/cyan]

    Filter publications:
        [cyan]labsite pubs list --year 2021 --tag RISC-V[/cyan]

    List talks in the gallery:
        [cyan]labsite gallery list --category talk[/cyan]
    """
    setup_cli_logging(verbose)
    for error in collect_env_var_errors():
        console.print(f"[yellow]Warning: {error}[/yellow]")
    ctx.obj = {"content_dir": content_dir}


@app.command()
def version():
    """Show labsite version"""
    typer.echo(f"labsite version {__version__}")


@app.command()
def browse(ctx: typer.Context):
    """Open the interactive browser"""
    from labsite.content import ContentLoader
    from labsite.ui.app import LabsiteApp
    from labsite.utils.logging import setup_tui_logging

    try:
        # Fail before the TUI takes over the terminal
        loader = ContentLoader(ctx.obj.get("content_dir") if ctx.obj else None)
        loader.load_publications()
        loader.load_media()
        loader.load_news()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    try:
        get_debounce_ms()
    except LabsiteError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1) from e

    setup_tui_logging()
    try:
        LabsiteApp(loader=loader).run()
    except KeyboardInterrupt:
        pass


def run():
    """Console script entry point"""
    app()


if __name__ == "__main__":
    run()
