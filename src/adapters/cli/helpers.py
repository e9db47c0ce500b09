"""
Utilitaires partages pour les commandes CLI de PosterForge.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et verifiant la configuration
- close_api_clients : fermeture des clients HTTP en fin de commande
- media_icon / format_item : rendu court d'un dossier media
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container
from src.core.entities.media import MediaItem
from src.core.value_objects.parsed_info import MediaType

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_config: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_config: Si True (defaut), arrete la commande (code 1) quand
            les cles API ou les dossiers media ne sont pas configures.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_config:
                settings = container.config()
                if not settings.is_configured:
                    missing = ", ".join(settings.missing_settings())
                    console.print(f"[red]Configuration incomplete: {missing}[/red]")
                    raise typer.Exit(1)
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


async def close_api_clients(container) -> None:
    """Ferme les clients HTTP TMDB et OMDb du container."""
    await container.tmdb_client().close()
    await container.omdb_client().close()


def media_icon(media_type: MediaType) -> str:
    """Icone du type de media."""
    return "📺" if media_type == MediaType.SERIES else "🎬"


def format_item(item: MediaItem) -> str:
    """Ligne courte "icone Titre (Annee)" pour un dossier media."""
    return f"{media_icon(item.media_type)} {item.label}"
