"""
Point d'entrée CLI de PosterForge.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from .adapters.cli.commands import (
    dry_run,
    preview,
    process,
    scan,
    single,
    trial,
    watch,
)
from .config import Settings
from .container import Container
from .logging_config import configure_from_settings

__version__ = "0.1.0"

app = typer.Typer(
    name="posterforge",
    help="Posters notes (IMDb, Rotten Tomatoes, Metacritic) pour bibliothèques media",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """PosterForge - Badges de notes sur les posters de films et series."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose


# Monter les commandes
app.command()(scan)
app.command(name="dry-run")(dry_run)
# Note: "test" est renomme cote Python pour ne pas etre collecte par pytest
app.command(name="test")(trial)
app.command()(process)
app.command()(single)
app.command()(preview)
app.command()(watch)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration PosterForge")
    folders = ", ".join(str(f) for f in config.media_folders) or "(aucun)"
    typer.echo(f"Dossiers media : {folders}")
    typer.echo(f"Style : {config.poster_style.value}")
    typer.echo(f"Notes : {', '.join(config.ratings)}")
    typer.echo(f"Fichier poster : {config.poster_filename}")
    typer.echo(f"Écrasement : {'oui' if config.overwrite else 'non'}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"PosterForge v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API web PosterForge."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_from_settings(settings)

    logger.info("Démarrage de PosterForge", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
