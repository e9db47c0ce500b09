"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible, colorée, pour suivre un traitement ou la surveillance
- Sortie fichier : sérialisée en JSON, avec rotation, pour retrouver l'historique
  des posters générés et des erreurs API

Les modules journalisent via `from loguru import logger` en passant le contexte
en arguments nommés (ex: logger.info("Poster écrit", folder=...)).
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from src.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/posterforge.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    console: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
        console : Ajoute le handler stderr (désactivé quand rich gère l'affichage)
    """
    # Supprime le handler par défaut
    logger.remove()

    if console:
        logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    # Handler fichier - capture tout, y compris les appels API en DEBUG
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe (watcher, tâches web)
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)


def configure_from_settings(settings: "Settings", console: bool = True) -> None:
    """Configure le logging depuis les paramètres de l'application."""
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        console=console,
    )
