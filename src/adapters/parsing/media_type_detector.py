"""
Detection du type de media (film ou serie) d'apres le contenu d'un dossier.

Ce module fournit FolderMediaTypeDetector qui implemente IMediaTypeDetector.
Deux heuristiques independantes sont combinees par OU :
- un sous-dossier de saison ("Season 1", "Season", "S01")
- un fichier video nomme comme un episode ("S01E02", "1x02")
"""

import re
from pathlib import Path
from typing import Iterable

from loguru import logger

from src.core.ports.file_system import DirectoryEntry, IFileSystem
from src.core.ports.parser import IMediaTypeDetector
from src.core.value_objects.parsed_info import MediaType
from src.utils.constants import VIDEO_EXTENSIONS

# "Season", "Season 1", "Season01", "S01" (suivi d'un espace ou de la fin du nom)
SEASON_FOLDER_PATTERN = re.compile(r"^(?:season\s*\d*|s\d+)(?:\s|$)", re.IGNORECASE)

# "S01E02" ou "1x02" en tant que jeton (pas "1920x1080")
EPISODE_FILE_PATTERN = re.compile(
    r"s\d{1,2}e\d{1,2}|(?<!\d)\d{1,2}x\d{1,2}(?!\d)", re.IGNORECASE
)


def is_season_folder(name: str) -> bool:
    """Vrai si le nom ressemble a un dossier de saison."""
    return SEASON_FOLDER_PATTERN.match(name) is not None


def is_episode_file(name: str) -> bool:
    """Vrai si le nom est celui d'un fichier video d'episode."""
    if Path(name).suffix.lower() not in VIDEO_EXTENSIONS:
        return False
    return EPISODE_FILE_PATTERN.search(name) is not None


def classify_entries(entries: Iterable[DirectoryEntry]) -> MediaType:
    """
    Classe le contenu immediat d'un dossier.

    Fonction pure : aucune entree/sortie, utilisable sur une liste
    construite a la main dans les tests.

    Args:
        entries: Entrees immediates du dossier

    Returns:
        MediaType.SERIES si une heuristique se declenche, MediaType.MOVIE sinon
    """
    for entry in entries:
        if entry.is_dir and is_season_folder(entry.name):
            return MediaType.SERIES
        if not entry.is_dir and is_episode_file(entry.name):
            return MediaType.SERIES
    return MediaType.MOVIE


class FolderMediaTypeDetector(IMediaTypeDetector):
    """
    Detecteur film/serie lisant un seul niveau de repertoire.

    Le listage passe par IFileSystem ; un dossier illisible ou absent
    donne une liste vide et donc MediaType.MOVIE.
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le detecteur.

        Args:
            file_system: Implementation de IFileSystem pour lister le dossier
        """
        self._file_system = file_system

    def detect(self, folder_path: Path) -> MediaType:
        """Classe un dossier media d'apres son contenu immediat."""
        media_type = classify_entries(self._file_system.list_entries(folder_path))
        logger.debug("Type detecte", folder=folder_path.name, media_type=media_type.value)
        return media_type
