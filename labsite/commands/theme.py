"""
Theme preference commands for labsite
"""

import typer

from labsite.ui.themes import (
    ThemePreference,
    ThemeStore,
    detect_system_prefers_dark,
    next_preference,
    preference_indicator,
    resolve_theme,
)
from labsite.utils.output import console

app = typer.Typer(help="Show or change the theme preference")


def _describe(preference: ThemePreference) -> str:
    resolved = resolve_theme(preference, detect_system_prefers_dark())
    return f"{preference_indicator(preference)} {preference.value} (renders {resolved.value})"


@app.command()
def show():
    """Show the current theme preference"""
    console.print(_describe(ThemeStore().load()))


@app.command("set")
def set_theme(
    preference: str = typer.Argument(..., help="light, dark or system"),
):
    """Set and persist the theme preference"""
    try:
        parsed = ThemePreference(preference.strip().lower())
    except ValueError as e:
        console.print(f"[red]Invalid theme '{preference}'. Use light, dark or system.[/red]")
        raise typer.Exit(1) from e

    ThemeStore().save(parsed)
    console.print(f"[green]Theme set:[/green] {_describe(parsed)}")


@app.command()
def cycle():
    """Advance light -> dark -> system"""
    store = ThemeStore()
    new_preference = next_preference(store.load())
    store.save(new_preference)
    console.print(f"[green]Theme set:[/green] {_describe(new_preference)}")
