"""
Commande CLI de surveillance des bibliotheques (watch).
"""

import asyncio

from loguru import logger

from src.adapters.cli.helpers import close_api_clients, console, with_container


def watch() -> None:
    """Surveille les dossiers media et genere les posters des nouveaux titres."""
    try:
        asyncio.run(_watch_async())
    except KeyboardInterrupt:
        console.print("\n[yellow]Surveillance interrompue.[/yellow]")


@with_container()
async def _watch_async(container) -> None:
    """Implementation async de la commande watch."""
    config = container.config()
    watcher = container.folder_watcher()

    watcher.start(asyncio.get_running_loop())
    if watcher.watched_count == 0:
        console.print("[red]Aucun dossier media existant a surveiller.[/red]")
        return

    console.print(
        f"[bold green]Surveillance de {watcher.watched_count} dossier(s)[/bold green] "
        f"(anti-rebond {config.watch_debounce_seconds:g}s) - Ctrl+C pour arreter"
    )
    try:
        while True:
            await asyncio.sleep(1)
    finally:
        watcher.stop()
        await close_api_clients(container)
        logger.info("Commande watch terminee")
