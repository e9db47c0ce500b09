"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour les APIs externes :
le catalogue de métadonnées (TMDB) qui fournit le poster de base et une note
native, et la source de notes (OMDb) qui fournit les notes IMDb, Rotten
Tomatoes et Metacritic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.value_objects.parsed_info import MediaType
from src.core.value_objects.ratings import RatingSet


@dataclass
class SearchResult:
    """
    Résultat de recherche depuis le catalogue.

    Attributs :
        id : ID spécifique à l'API (ID TMDB)
        title : Titre depuis l'API
        original_title : Titre en langue originale
        year : Année de sortie/première diffusion
        poster_path : Chemin du poster sur le CDN du catalogue
        vote_average : Note moyenne native du catalogue (0-10)
        source : Identifiant de la source API ("tmdb")
    """

    id: str
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    source: str = ""


@dataclass
class CatalogMatch:
    """
    Correspondance retenue dans le catalogue pour un dossier media.

    Attributs :
        id : ID catalogue (TMDB)
        title : Titre du catalogue
        year : Année de sortie/première diffusion
        media_type : Film ou série
        poster_path : Chemin du poster sur le CDN (None si aucun poster)
        vote_average : Note native du catalogue (0-10)
        vote_count : Nombre de votes
        imdb_id : ID IMDb associé (clé de la source de notes)
    """

    id: str
    title: str
    year: Optional[int] = None
    media_type: MediaType = MediaType.MOVIE
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    imdb_id: Optional[str] = None


class ICatalogClient(ABC):
    """
    Interface pour le catalogue de métadonnées média.

    Définit le contrat pour retrouver un titre (film ou série) et télécharger
    son poster de base.
    """

    @abstractmethod
    async def find_movie(
        self,
        title: str,
        year: Optional[int] = None,
        tmdb_id: Optional[str] = None,
    ) -> Optional[CatalogMatch]:
        """
        Retrouve un film par titre/année, ou directement par ID catalogue.

        Retourne :
            La meilleure correspondance, ou None si non trouvé
        """
        ...

    @abstractmethod
    async def find_show(
        self,
        title: str,
        year: Optional[int] = None,
        tmdb_id: Optional[str] = None,
    ) -> Optional[CatalogMatch]:
        """
        Retrouve une série par titre/année, ou directement par ID catalogue.

        Retourne :
            La meilleure correspondance, ou None si non trouvée
        """
        ...

    @abstractmethod
    def poster_url(self, poster_path: str, size: str = "w780") -> str:
        """Construit l'URL publique d'un poster."""
        ...

    @abstractmethod
    async def download_poster(self, poster_path: str, size: str = "w780") -> bytes:
        """Télécharge l'image du poster et retourne ses octets encodés."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...


class IRatingsClient(ABC):
    """
    Interface pour la source de notes critiques et public.
    """

    @abstractmethod
    async def get_ratings(self, imdb_id: str) -> Optional[RatingSet]:
        """
        Récupère les notes normalisées d'un titre via son ID IMDb.

        Retourne :
            RatingSet normalisé, ou None si la source ne connaît pas le titre
        """
        ...

    @abstractmethod
    async def search_by_title(
        self, title: str, year: Optional[int] = None
    ) -> Optional[RatingSet]:
        """
        Récupère les notes d'un titre par recherche titre/année (repli sans ID IMDb).
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb')."""
        ...
