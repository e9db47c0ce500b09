"""
Commandes CLI de generation des posters (process, test, single, preview).
"""

import asyncio
import base64
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from src.adapters.cli.helpers import (
    close_api_clients,
    console,
    format_item,
    suppress_loguru,
    with_container,
)
from src.core.value_objects.parsed_info import MediaType

SKIPPED_MESSAGE = "Skipped (poster exists)"


def process(
    regenerate_all: Annotated[
        bool,
        typer.Option("--all", help="Regenere aussi les posters existants"),
    ] = False,
) -> None:
    """Genere les posters notes de tous les dossiers media."""
    asyncio.run(_process_async(regenerate_all))


@with_container()
async def _process_async(container, regenerate_all: bool) -> None:
    """Implementation async de la commande process."""
    processor = container.poster_processor()

    with suppress_loguru():
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console,
            ) as progress:
                task = progress.add_task("Generation des posters", total=None)

                def on_progress(result, current: int, total: int) -> None:
                    status = "[green]OK[/green]" if result.success else "[red]ECHEC[/red]"
                    progress.update(task, completed=current, total=total)
                    progress.console.print(f"{status} {format_item(result.item)} - {result.message}")

                results = await processor.process_all(
                    on_progress=on_progress, overwrite_all=regenerate_all
                )
        finally:
            await close_api_clients(container)

    created = sum(1 for r in results if r.success and r.message != SKIPPED_MESSAGE)
    skipped = sum(1 for r in results if r.message == SKIPPED_MESSAGE)
    failed = sum(1 for r in results if not r.success)

    table = Table(title="Termine", show_header=False)
    table.add_row("[green]Crees[/green]", str(created))
    table.add_row("[yellow]Ignores[/yellow]", str(skipped))
    table.add_row("[red]Echecs[/red]", str(failed))
    console.print(table)


def trial() -> None:
    """Traite un seul dossier sans poster, pour verifier le rendu."""
    asyncio.run(_trial_async())


@with_container()
async def _trial_async(container) -> None:
    """Implementation async de la commande test (un seul element)."""
    processor = container.poster_processor()

    with suppress_loguru():
        items = [i for i in processor.scan() if not i.has_poster]
        if not items:
            console.print("[green]Aucun dossier a traiter.[/green]")
            return

        item = items[0]
        console.print(f"[bold]Test avec :[/bold] {format_item(item)}")
        console.print(f"[dim]{item.folder_path}[/dim]\n")

        try:
            result = await processor.process_item(item)
        finally:
            await close_api_clients(container)

    if not result.success:
        console.print(f"[red]ECHEC : {result.message}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]OK : {result.message}[/green]")
    console.print(f"Verifier le poster : {result.poster_path}")


def single(
    folder: Annotated[
        Path,
        typer.Argument(help="Dossier media a traiter"),
    ],
) -> None:
    """Genere (ou regenere) le poster d'un seul dossier media."""
    asyncio.run(_single_async(folder))


@with_container()
async def _single_async(container, folder: Path) -> None:
    """Implementation async de la commande single."""
    if not folder.is_dir():
        console.print(f"[red]Dossier introuvable : {folder}[/red]")
        raise typer.Exit(1)

    processor = container.poster_processor()
    with suppress_loguru():
        try:
            result = await processor.process_single(folder)
        finally:
            await close_api_clients(container)

    item = result.item
    console.print(f"[bold]{format_item(item)}[/bold]  [dim]{item.folder_path}[/dim]")
    if not result.success:
        console.print(f"[red]ECHEC : {result.message}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]OK : {result.message}[/green] -> {result.poster_path}")


def preview(
    title: Annotated[str, typer.Argument(help="Titre a rechercher")],
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee")] = None,
    series: Annotated[bool, typer.Option("--series", help="Rechercher une serie")] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Enregistre l'apercu JPEG dans ce fichier"),
    ] = None,
) -> None:
    """Affiche les notes d'un titre et enregistre optionnellement l'apercu."""
    asyncio.run(_preview_async(title, year, series, output))


@with_container()
async def _preview_async(
    container, title: str, year: Optional[int], series: bool, output: Optional[Path]
) -> None:
    """Implementation async de la commande preview."""
    processor = container.poster_processor()
    media_type = MediaType.SERIES if series else MediaType.MOVIE

    with suppress_loguru():
        try:
            result = await processor.preview(title, year, media_type)
        finally:
            await close_api_clients(container)

    if result is None:
        console.print(f"[red]Titre introuvable : {title}[/red]")
        raise typer.Exit(1)

    label = f"{result.title} ({result.year})" if result.year else result.title
    console.print(f"[bold]{label}[/bold]")
    for rating in result.ratings:
        console.print(f"  {rating['source']}: {rating['value']}")
    if not result.ratings:
        console.print("  [dim]Aucune note[/dim]")
    if result.poster_url:
        console.print(f"[dim]{result.poster_url}[/dim]")

    if output and result.preview_image:
        encoded = result.preview_image.split(",", 1)[1]
        output.write_bytes(base64.b64decode(encoded))
        console.print(f"[green]Apercu enregistre : {output}[/green]")
