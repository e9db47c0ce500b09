"""
Commandes CLI de consultation des bibliotheques (scan, dry-run).

Aucune de ces commandes n'appelle les API externes ni n'ecrit de fichier.
"""

import asyncio

from rich.table import Table

from src.adapters.cli.helpers import console, format_item, suppress_loguru, with_container
from src.core.value_objects.parsed_info import MediaType

# Nombre maximum d'elements listes par la commande scan
SCAN_LIST_LIMIT = 20


def scan() -> None:
    """Scanne les dossiers media et affiche un resume."""
    asyncio.run(_scan_async())


@with_container()
async def _scan_async(container) -> None:
    """Implementation async de la commande scan."""
    processor = container.poster_processor()

    with suppress_loguru():
        with console.status("[bold blue]Scan des dossiers media..."):
            items = processor.scan()

        pending = [i for i in items if not i.has_poster]
        done = [i for i in items if i.has_poster]

        table = Table(title="Resume", show_header=False)
        table.add_column("Categorie", style="bold")
        table.add_column("Nombre", justify="right")
        table.add_row("Total", str(len(items)))
        table.add_row("Films", str(sum(1 for i in items if i.media_type == MediaType.MOVIE)))
        table.add_row("Series", str(sum(1 for i in items if i.media_type == MediaType.SERIES)))
        table.add_row("[green]Deja traites[/green]", str(len(done)))
        table.add_row("[yellow]A traiter[/yellow]", str(len(pending)))
        console.print(table)

        if pending:
            console.print("\n[bold]Dossiers qui seront traites :[/bold]")
            for item in pending[:SCAN_LIST_LIMIT]:
                console.print(f"  ⏳ {format_item(item)}")
            if len(pending) > SCAN_LIST_LIMIT:
                console.print(f"  [dim]... et {len(pending) - SCAN_LIST_LIMIT} autres[/dim]")


def dry_run() -> None:
    """Affiche ce qui serait traite, sans rien modifier."""
    asyncio.run(_dry_run_async())


@with_container()
async def _dry_run_async(container) -> None:
    """Implementation async de la commande dry-run."""
    processor = container.poster_processor()
    config = container.config()

    with suppress_loguru():
        results = await processor.process_all(dry_run=True)
        to_generate = [r for r in results if r.message == "Would generate poster"]

        console.print(f"[bold]Simulation : {len(to_generate)} poster(s) seraient crees[/bold]\n")
        for result in to_generate:
            target = result.item.folder_path / config.poster_filename
            console.print(f"  {format_item(result.item)}")
            console.print(f"     [dim]-> {target}[/dim]")

        console.print("\n[green]Aucune modification effectuee.[/green] Lancer 'posterforge process' pour generer.")
