"""
Media gallery commands for labsite
"""

import typer
from rich.table import Table

from labsite.exceptions import LabsiteError
from labsite.services.filter_engine import ALL, FilterState, ListFilterEngine
from labsite.services.views import GALLERY_VIEW
from labsite.ui.badges import category_badge
from labsite.utils.output import console, print_json

from ._common import get_loader

app = typer.Typer(help="Browse the media gallery")


@app.command("list")
def list_media(
    ctx: typer.Context,
    category: str = typer.Option(ALL, "--category", "-c", help="Only this category"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """List gallery items in content order"""
    try:
        items = get_loader(ctx).load_media()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    engine = ListFilterEngine(items, GALLERY_VIEW)
    results = engine.derive(FilterState(selections={"category": category}))

    if format == "json":
        print_json([item.to_dict() for item in results])
        return
    if format != "table":
        console.print(f"[red]Unknown format: {format}[/red]")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No images found in this category.[/yellow]")
        return

    table = Table(title="Gallery")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Category", no_wrap=True)
    table.add_column("Caption", style="magenta")
    table.add_column("Event", style="green")
    table.add_column("Date", style="yellow")

    for position, item in enumerate(results, start=1):
        table.add_row(
            str(position),
            category_badge(item.category),
            item.caption,
            item.event or "",
            item.date or "",
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(results)} images[/dim]")


@app.command()
def categories(ctx: typer.Context):
    """Show gallery categories"""
    try:
        items = get_loader(ctx).load_media()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    engine = ListFilterEngine(items, GALLERY_VIEW)
    labels = [option.label for option in engine.options()["category"]]
    console.print(", ".join(labels))
