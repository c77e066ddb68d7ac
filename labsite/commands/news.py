"""
News listing command for labsite
"""

import typer

from labsite.config.constants import DEFAULT_NEWS_LIMIT
from labsite.exceptions import LabsiteError
from labsite.services.views import order_news
from labsite.utils.output import console, print_json

from ._common import get_loader


def news(
    ctx: typer.Context,
    limit: int = typer.Option(DEFAULT_NEWS_LIMIT, "--limit", "-n", help="Maximum items to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show recent news, pinned items first"""
    try:
        items = order_news(get_loader(ctx).load_news(), max_items=limit)
    except LabsiteError as e:
        console.print(f"[red]Error loading content: {e}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        print_json([item.to_dict() for item in items])
        return

    if not items:
        console.print("[yellow]No news yet[/yellow]")
        return

    for item in items:
        pin = "📌 " if item.pinned else ""
        console.print(f"{pin}[bold]{item.title}[/bold] [dim]{item.date} · {item.type.value}[/dim]")
        console.print(f"  {item.description}")
        if item.link:
            console.print(f"  [cyan]{item.link}[/cyan]")
