"""
Service de traitement des posters.

Orchestre le pipeline complet pour un dossier media :
1. Recherche du titre dans le catalogue (TMDB), film ou serie selon le type
2. Telechargement du poster de base
3. Recuperation des notes (OMDb) via l'ID IMDb
4. Composition des badges de notes
5. Ecriture du poster dans le dossier media

Les echecs par element (HTTP, decodage, ecriture) sont convertis en
ProcessResult en echec : un lot n'est jamais interrompu.
"""

import asyncio
import base64
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Callable, Optional

import httpx
from loguru import logger

from src.adapters.api.retry import RateLimitError, public_url
from src.config import Settings
from src.core.entities.media import MediaItem
from src.core.exceptions import PosterDecodeError
from src.core.ports.api_clients import CatalogMatch, ICatalogClient, IRatingsClient
from src.core.ports.file_system import IFileSystem
from src.core.value_objects.parsed_info import MediaType
from src.core.value_objects.ratings import RatingSet
from src.services.compositor import ComposeOptions, PosterCompositor
from src.services.scanner import ScannerService

# Erreurs converties en resultat en echec (ValueError: corps JSON invalide,
# KeyError: champ attendu absent d'une reponse API)
_ITEM_ERRORS = (httpx.HTTPError, RateLimitError, PosterDecodeError, OSError, ValueError, KeyError)

ProgressCallback = Callable[["ProcessResult", int, int], None]


def error_message(error: Exception) -> str:
    """
    Message lisible d'une erreur de traitement, sans cle API.

    str() d'une HTTPStatusError contient l'URL complete, query string
    (apikey=, api_key=) comprise : seuls le code et l'URL publique sont gardes.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code} for {public_url(error.request.url)}"
    return str(error) or type(error).__name__


@dataclass
class ProcessResult:
    """
    Resultat du traitement d'un dossier media.

    Attributs:
        item: Dossier media traite
        success: True si le poster a ete cree (ou volontairement ignore)
        message: Message lisible ("Poster created", "Not found on TMDB", ...)
        poster_path: Chemin du poster ecrit ou existant
    """

    item: MediaItem
    success: bool
    message: str
    poster_path: Optional[Path] = None

    def to_dict(self) -> dict:
        return {
            "item": self.item.to_dict(),
            "success": self.success,
            "message": self.message,
            "poster_path": str(self.poster_path) if self.poster_path else None,
        }


@dataclass
class PreviewResult:
    """Apercu d'un poster note, sans ecriture sur disque."""

    title: str
    year: Optional[int] = None
    poster_url: Optional[str] = None
    preview_image: Optional[str] = None  # data URL base64 du JPEG compose
    ratings: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "year": self.year,
            "poster_url": self.poster_url,
            "preview_image": self.preview_image,
            "ratings": self.ratings,
        }


class PosterProcessor:
    """
    Pipeline de generation des posters notes.

    Example:
        processor = PosterProcessor(scanner, tmdb, omdb, compositor, fs, settings)
        results = await processor.process_all(on_progress=print)
    """

    def __init__(
        self,
        scanner: ScannerService,
        catalog_client: ICatalogClient,
        ratings_client: IRatingsClient,
        compositor: PosterCompositor,
        file_system: IFileSystem,
        settings: Settings,
    ) -> None:
        """
        Initialise le processeur.

        Args:
            scanner: Service de scan des bibliotheques
            catalog_client: Client catalogue (TMDB) pour le poster de base
            ratings_client: Client de notes (OMDb)
            compositor: Service de composition des badges
            file_system: Port d'ecriture du poster
            settings: Configuration (style, sources, fichier de sortie, delai)
        """
        self._scanner = scanner
        self._catalog = catalog_client
        self._ratings = ratings_client
        self._compositor = compositor
        self._file_system = file_system
        self._settings = settings

    def compose_options(self, catalog_score: Optional[float] = None) -> ComposeOptions:
        """Options de composition issues de la configuration."""
        return ComposeOptions(
            style=self._settings.poster_style,
            preferred_sources=tuple(self._settings.ratings),
            catalog_score=catalog_score,
        )

    async def process_item(
        self, item: MediaItem, overwrite: Optional[bool] = None
    ) -> ProcessResult:
        """
        Genere le poster note d'un dossier media.

        Args:
            item: Dossier media a traiter
            overwrite: Regenere un poster existant (defaut: settings.overwrite)

        Returns:
            ProcessResult decrivant le resultat (jamais d'exception pour
            les erreurs HTTP, de decodage ou d'ecriture)
        """
        overwrite = self._settings.overwrite if overwrite is None else overwrite
        poster_path = item.folder_path / self._settings.poster_filename

        if item.has_poster and not overwrite:
            return ProcessResult(item, True, "Skipped (poster exists)", poster_path)

        try:
            match = await self._find(item.media_type, item.title, item.year, item.tmdb_id)
            if match is None or not match.poster_path:
                return ProcessResult(item, False, "Not found on TMDB")

            base_image = await self._catalog.download_poster(
                match.poster_path, self._settings.poster_size
            )
            ratings = await self._fetch_ratings(item.imdb_id or match.imdb_id, match)
            poster = await self._compose(base_image, ratings, match.vote_average)
            self._file_system.write_bytes(poster_path, poster)
        except _ITEM_ERRORS as e:
            message = error_message(e)
            logger.warning("Echec du traitement", folder=item.folder_name, error=message)
            return ProcessResult(item, False, message)

        logger.info("Poster cree", folder=item.folder_name, title=match.title)
        return ProcessResult(item, True, "Poster created", poster_path)

    async def preview(
        self,
        title: str,
        year: Optional[int] = None,
        media_type: MediaType = MediaType.MOVIE,
    ) -> Optional[PreviewResult]:
        """
        Compose un apercu du poster note sans rien ecrire.

        Args:
            title: Titre a rechercher
            year: Annee optionnelle
            media_type: Film ou serie

        Returns:
            PreviewResult (image en data URL base64), ou None si non trouve

        Raises:
            httpx.HTTPError: En cas d'erreur des API externes
        """
        match = await self._find(media_type, title, year, None)
        if match is None:
            return None

        ratings = await self._fetch_ratings(match.imdb_id, match)
        result = PreviewResult(
            title=match.title,
            year=match.year or year,
            ratings=ratings.as_list() if ratings else [],
        )

        if match.poster_path:
            result.poster_url = self._catalog.poster_url(match.poster_path, self._settings.poster_size)
            base_image = await self._catalog.download_poster(
                match.poster_path, self._settings.poster_size
            )
            poster = await self._compose(base_image, ratings, match.vote_average)
            result.preview_image = "data:image/jpeg;base64," + base64.b64encode(poster).decode("ascii")

        return result

    async def process_single(self, folder_path: Path) -> ProcessResult:
        """
        Traite un dossier media unique, meme s'il a deja un poster.

        Args:
            folder_path: Chemin du dossier media

        Returns:
            ProcessResult du traitement
        """
        item = self._scanner.build_item(Path(folder_path))
        return await self.process_item(item, overwrite=True)

    def scan(self) -> list[MediaItem]:
        """Scanne les bibliotheques configurees sans rien traiter."""
        return self._scanner.scan_all(self._settings.media_folders)

    async def process_all(
        self,
        on_progress: Optional[ProgressCallback] = None,
        dry_run: bool = False,
        overwrite_all: bool = False,
    ) -> list[ProcessResult]:
        """
        Traite tous les dossiers des bibliotheques configurees.

        Args:
            on_progress: Appele apres chaque element avec (resultat, index, total)
            dry_run: Simule sans appel API ni ecriture
            overwrite_all: Regenere aussi les posters existants

        Returns:
            Liste des ProcessResult, dans l'ordre du scan
        """
        items = self.scan()
        overwrite = overwrite_all or self._settings.overwrite
        logger.info("Traitement par lot", items=len(items), dry_run=dry_run, overwrite=overwrite)

        results = []
        for index, item in enumerate(items, start=1):
            if dry_run:
                would_process = not item.has_poster or overwrite
                message = "Would generate poster" if would_process else "Would skip (poster exists)"
                result = ProcessResult(item, True, message)
            else:
                result = await self.process_item(item, overwrite=overwrite)
            results.append(result)

            if on_progress:
                on_progress(result, index, len(items))

            # Menager les API entre deux elements reels
            if not dry_run and self._settings.request_delay_seconds > 0:
                await asyncio.sleep(self._settings.request_delay_seconds)

        return results

    async def _find(
        self,
        media_type: MediaType,
        title: str,
        year: Optional[int],
        tmdb_id: Optional[str],
    ) -> Optional[CatalogMatch]:
        if media_type == MediaType.SERIES:
            return await self._catalog.find_show(title, year, tmdb_id)
        return await self._catalog.find_movie(title, year, tmdb_id)

    async def _fetch_ratings(
        self, imdb_id: Optional[str], match: CatalogMatch
    ) -> Optional[RatingSet]:
        """Notes par ID IMDb, ou par titre/annee si aucun ID n'est connu."""
        if imdb_id:
            return await self._ratings.get_ratings(imdb_id)
        return await self._ratings.search_by_title(match.title, match.year)

    async def _compose(
        self, base_image: bytes, ratings: Optional[RatingSet], catalog_score: Optional[float]
    ) -> bytes:
        # Composition CPU hors de la boucle d'evenements
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            partial(
                self._compositor.compose,
                base_image,
                ratings,
                self.compose_options(catalog_score),
            ),
        )
