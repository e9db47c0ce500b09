"""
Service de scan des dossiers media.

Orchestre le scan des bibliotheques en coordonnant le systeme de fichiers,
le parser de noms de dossiers et le detecteur film/serie : chaque
sous-dossier immediat d'une bibliotheque devient un MediaItem.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from src.config import Settings
from src.core.entities.media import MediaItem
from src.core.ports.file_system import IFileSystem
from src.core.ports.parser import IFolderNameParser, IMediaTypeDetector
from src.utils.constants import IGNORED_FOLDER_PREFIXES


class ScannerService:
    """
    Service orchestrant le scan des bibliotheques media.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister les dossiers
    - Le parser de noms (IFolderNameParser) pour extraire titre, annee et IDs
    - Le detecteur (IMediaTypeDetector) pour classer film ou serie
    """

    def __init__(
        self,
        file_system: IFileSystem,
        folder_parser: IFolderNameParser,
        type_detector: IMediaTypeDetector,
        settings: Settings,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour les operations fichiers
            folder_parser: Implementation de IFolderNameParser pour le parsing
            type_detector: Implementation de IMediaTypeDetector pour film/serie
            settings: Configuration de l'application (nom du fichier poster)
        """
        self._file_system = file_system
        self._folder_parser = folder_parser
        self._type_detector = type_detector
        self._settings = settings

    def scan_folder(self, media_folder: Path) -> list[MediaItem]:
        """
        Scanne une bibliotheque et retourne un MediaItem par sous-dossier.

        Les dossiers caches ("." ) et de metadonnees NAS ("@eaDir") sont ignores.
        Un dossier de bibliotheque absent produit un warning et une liste vide.

        Args:
            media_folder: Racine de la bibliotheque (ex: /media/movies)

        Returns:
            Liste des MediaItem, tries par nom de dossier
        """
        if not self._file_system.exists(media_folder):
            logger.warning("Dossier media introuvable", folder=str(media_folder))
            return []

        items = []
        for entry in self._file_system.list_entries(media_folder):
            if not entry.is_dir or entry.name.startswith(IGNORED_FOLDER_PREFIXES):
                continue
            items.append(self.build_item(media_folder / entry.name))

        logger.info("Dossier scanne", folder=str(media_folder), items=len(items))
        return items

    def scan_all(self, media_folders: Iterable[Path]) -> list[MediaItem]:
        """Scanne plusieurs bibliotheques et concatene les resultats."""
        items: list[MediaItem] = []
        for folder in media_folders:
            items.extend(self.scan_folder(Path(folder)))
        return items

    def build_item(self, folder_path: Path) -> MediaItem:
        """
        Construit le MediaItem d'un dossier media unique.

        Args:
            folder_path: Chemin du dossier media

        Returns:
            MediaItem avec identite parsee, type detecte et presence du poster
        """
        parsed = self._folder_parser.parse(folder_path.name)
        return MediaItem(
            folder_path=folder_path,
            folder_name=folder_path.name,
            title=parsed.title,
            year=parsed.year,
            media_type=self._type_detector.detect(folder_path),
            imdb_id=parsed.imdb_id,
            tmdb_id=parsed.tmdb_id,
            tvdb_id=parsed.tvdb_id,
            has_poster=self._file_system.exists(folder_path / self._settings.poster_filename),
        )
