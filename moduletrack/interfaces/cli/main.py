"""
CLI Main - Typer-based command-line interface.

Usage:
    moduletrack list --search react --sort duree --desc
    moduletrack add "Introduction à React" 12
    moduletrack update 3 --duree 15
    moduletrack delete 3
    moduletrack stats
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from moduletrack.adapters.mockapi import MockAPIClient
from moduletrack.config import FetchError, ModuleValidationError, get_settings
from moduletrack.domains.modules import (
    Module,
    ModuleService,
    ModuleStore,
    ModuleView,
    SortKey,
    SortOrder,
    compute_stats,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(
    name="moduletrack",
    help="ModuleTrack - Gestion des modules de formation",
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    api_url: str | None = typer.Option(None, "--api-url", help="Modules API base URL"),
) -> None:
    """Configure logging and the remote store."""
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format=settings.log_format)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
    ctx.obj = {"api_url": api_url}


def build_client(api_url: str | None = None) -> MockAPIClient:
    """Create the remote store client, falling back to settings for the URL."""
    settings = get_settings()
    return MockAPIClient(
        base_url=api_url or settings.modules_api_url,
        timeout=settings.modules_api_timeout,
    )


def _run(ctx: typer.Context, operation: Callable[[ModuleService], Awaitable[T]]) -> T:
    """Run one async operation with a fresh client and store."""
    api_url = (ctx.obj or {}).get("api_url")

    async def runner() -> T:
        async with build_client(api_url) as client:
            return await operation(ModuleService(client, ModuleStore()))

    try:
        return asyncio.run(runner())
    except FetchError as e:
        console.print(f"[red]Erreur:[/red] {e.message}")
        raise typer.Exit(1)
    except ModuleValidationError as e:
        for field, message in e.errors.items():
            console.print(f"[red]{field}:[/red] {message}")
        raise typer.Exit(1)


def _hours(value: float) -> str:
    """Format a duration, at most two decimals (0.30000000000000004 -> 0.3h)."""
    if isinstance(value, float):
        return f"{value:.2f}".rstrip("0").rstrip(".") + "h"
    return f"{value}h"


def _module_table(modules: list[Module], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Nom", style="cyan")
    table.add_column("Durée", style="green", justify="right")
    for module in modules:
        table.add_row(module.id, module.nom, _hours(module.duree))
    return table


@app.command("list")
def list_modules(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by name or ID"),
    sort: SortKey = typer.Option(SortKey.NOM, "--sort", help="Sort key"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
) -> None:
    """List modules."""
    state = _run(ctx, lambda service: service.load())
    if state.error:
        console.print(f"[red]Erreur:[/red] {state.error}")
        raise typer.Exit(1)

    view = ModuleView(search, sort, SortOrder.DESC if desc else SortOrder.ASC)
    rows = view.apply(state.modules)

    if not rows:
        message = "Aucun module trouvé" if search.strip() else "Aucun module disponible"
        console.print(f"[yellow]{message}[/yellow]")
        return

    console.print(_module_table(rows, f"Modules ({view.sort_label()})"))
    console.print(f"[dim]{len(rows)} / {len(state.modules)} modules[/dim]")


@app.command()
def show(ctx: typer.Context, module_id: str = typer.Argument(..., help="Module ID")) -> None:
    """Show one module."""
    module = _run(ctx, lambda service: service.fetch(module_id))
    console.print(
        Panel(
            f"[bold]Nom:[/bold] {module.nom}\n[bold]Durée:[/bold] {_hours(module.duree)}",
            title=f"Module {module.id}",
        )
    )


@app.command()
def add(
    ctx: typer.Context,
    nom: str = typer.Argument(..., help="Module name"),
    duree: str = typer.Argument(..., help="Duration in hours"),
) -> None:
    """Create a module."""
    module = _run(ctx, lambda service: service.create(nom, duree))
    console.print(f'[green]Succès ![/green] Le module "{module.nom}" a été créé (ID {module.id}).')


@app.command()
def update(
    ctx: typer.Context,
    module_id: str = typer.Argument(..., help="Module ID"),
    nom: str | None = typer.Option(None, "--nom", "-n", help="New name"),
    duree: str | None = typer.Option(None, "--duree", "-d", help="New duration in hours"),
) -> None:
    """Update a module."""
    module = _run(ctx, lambda service: service.update(module_id, nom=nom, duree=duree))
    console.print(f'[green]Succès ![/green] Le module "{module.nom}" a été mis à jour.')


@app.command()
def delete(
    ctx: typer.Context,
    module_id: str = typer.Argument(..., help="Module ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a module."""
    if not yes and not typer.confirm(f"Supprimer le module {module_id} ?"):
        raise typer.Abort()

    _run(ctx, lambda service: service.delete(module_id))
    console.print(f"[green]Module {module_id} supprimé.[/green]")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show catalogue statistics."""
    state = _run(ctx, lambda service: service.load())
    if state.error:
        console.print(f"[red]Erreur:[/red] {state.error}")
        raise typer.Exit(1)

    summary = compute_stats(state.modules)

    table = Table(title="Statistiques")
    table.add_column("Métrique", style="cyan")
    table.add_column("Valeur", style="green", justify="right")
    table.add_row("Total Modules", str(summary.total_modules))
    table.add_row("Heures Totales", _hours(summary.total_hours))
    table.add_row("Durée Moyenne", f"{summary.average_hours}h")
    table.add_row("Module le Plus Long", _hours(summary.longest_module))
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from moduletrack import __version__

    console.print(f"ModuleTrack v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
