"""
Publication listing commands for labsite
"""

from typing import Optional

import typer
from rich.table import Table

from labsite.exceptions import LabsiteError
from labsite.services.filter_engine import ALL, FilterState, ListFilterEngine
from labsite.services.views import PUBLICATION_VIEW, format_authors
from labsite.ui.badges import publication_type_badge
from labsite.utils.output import console, print_json, truncate

from ._common import get_loader

app = typer.Typer(help="Browse and filter publications")


@app.command("list")
def list_publications(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", "-q", help="Search title, authors, venue and topics"),
    year: str = typer.Option(ALL, "--year", "-y", help="Only this year"),
    pub_type: str = typer.Option(ALL, "--type", "-t", help="Only this publication type"),
    tag: str = typer.Option(ALL, "--tag", help="Only publications with this topic"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """List publications, newest first"""
    try:
        publications = get_loader(ctx).load_publications()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    engine = ListFilterEngine(publications, PUBLICATION_VIEW)
    state = FilterState(
        query=query,
        selections={"year": year, "type": pub_type, "tags": tag},
    )
    results = engine.derive(state)

    if format == "json":
        print_json([p.to_dict() for p in results])
        return
    if format != "table":
        console.print(f"[red]Unknown format: {format}[/red]")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No publications match[/yellow]")
        console.print(f"[dim]Showing 0 of {engine.total} publications[/dim]")
        return

    table = Table(title="Publications")
    table.add_column("Year", style="cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Title", style="magenta")
    table.add_column("Authors", style="green")
    table.add_column("Venue", style="yellow")
    table.add_column("Topics", style="blue")

    for pub in results:
        table.add_row(
            str(pub.year),
            publication_type_badge(pub.type),
            truncate(pub.title, 60),
            format_authors(pub.authors),
            pub.venue,
            ", ".join(pub.tags),
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(results)} of {engine.total} publications[/dim]")


@app.command()
def options(
    ctx: typer.Context,
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Show the values available for each filter"""
    try:
        publications = get_loader(ctx).load_publications()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    engine = ListFilterEngine(publications, PUBLICATION_VIEW)
    all_options = engine.options()

    if format == "json":
        print_json(
            {name: [o.value for o in opts] for name, opts in all_options.items()}
        )
        return

    for filter_field in PUBLICATION_VIEW.filter_fields:
        labels = [o.label for o in all_options[filter_field.name]]
        console.print(f"[bold]{filter_field.label}:[/bold] {', '.join(labels)}")


@app.command()
def show(
    ctx: typer.Context,
    publication_id: str = typer.Argument(..., help="Publication id"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json"),
):
    """Show one publication with its abstract and links"""
    try:
        publications = get_loader(ctx).load_publications()
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    pub = next((p for p in publications if p.id == publication_id), None)
    if pub is None:
        console.print(f"[red]Publication not found: {publication_id}[/red]")
        raise typer.Exit(1)

    if format == "json":
        print_json(pub.to_dict())
        return

    console.print(f"[bold]{pub.title}[/bold]")
    console.print(f"{publication_type_badge(pub.type)}  {pub.venue} · {pub.year}")
    console.print(f"[dim]{format_authors(pub.authors)}[/dim]\n")
    if pub.abstract:
        console.print(pub.abstract)
    if pub.tags:
        console.print(f"\n[cyan]{' · '.join(pub.tags)}[/cyan]")
    for name, url in pub.links.to_dict().items():
        console.print(f"[bold]{name}[/bold]: {url}")
