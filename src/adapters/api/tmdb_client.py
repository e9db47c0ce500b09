"""
Client TMDB pour la recherche de titres et le telechargement des posters.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Utilise le cache persistant et le mecanisme de retry pour gerer
le rate limiting.

Usage:
    cache = APICache()
    client = TMDBClient(api_key="your_key", cache=cache)
    match = await client.find_movie("Avatar", year=2009)
    poster = await client.download_poster(match.poster_path)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.cache import APICache
from src.adapters.api.retry import request_with_retry
from src.core.ports.api_clients import CatalogMatch, ICatalogClient, SearchResult
from src.core.value_objects.parsed_info import MediaType


def _year_from_date(value: Optional[str]) -> Optional[int]:
    """Extrait l'annee d'une date TMDB (format YYYY-MM-DD)."""
    if value and len(value) >= 4 and value[:4].isdigit():
        return int(value[:4])
    return None


class TMDBClient(ICatalogClient):
    """
    Client API TMDB pour les films et series.

    Implemente ICatalogClient avec:
    - Recherche de films et series par titre (avec filtre annee optionnel)
    - Recuperation des details et de l'ID IMDb associe
    - Telechargement du poster de base
    - Cache persistant (24h recherches, 7j details, 30j posters)
    - Retry automatique sur rate limiting (429)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

    def __init__(self, api_key: str, cache: APICache, language: str = "en-US") -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (API Key v3 ou Read Access Token v4)
            cache: Instance APICache pour le caching des resultats
            language: Langue des titres retournes (ex: "en-US", "fr-FR")
        """
        self._api_key = api_key
        self._cache = cache
        self._language = language
        self._client: Optional[httpx.AsyncClient] = None
        self._image_client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP de l'API, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=30.0,
            )
        return self._client

    def _get_image_client(self) -> httpx.AsyncClient:
        """Client HTTP du CDN d'images, sans authentification."""
        if self._image_client is None or self._image_client.is_closed:
            self._image_client = httpx.AsyncClient(
                base_url=self.TMDB_IMAGE_BASE_URL,
                timeout=60.0,
                follow_redirects=True,
            )
        return self._image_client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def search_movie(
        self,
        query: str,
        year: Optional[int] = None,
    ) -> list[SearchResult]:
        """
        Recherche des films par titre.

        Utilise le pattern cache-first: verifie le cache AVANT de faire
        un appel API. Les resultats sont caches pour 24 heures.

        Args:
            query: Titre du film a rechercher
            year: Annee de sortie optionnelle pour filtrer

        Returns:
            Liste de SearchResult (vide si aucun resultat)
        """
        params = {"query": query, "language": self._language, "include_adult": "false"}
        if year:
            params["year"] = str(year)
        return await self._search("/search/movie", f"tmdb:search_movie:{query}:{year}", params)

    async def search_tv(
        self,
        query: str,
        year: Optional[int] = None,
    ) -> list[SearchResult]:
        """
        Recherche des series TV par titre.

        Args:
            query: Titre de la serie a rechercher
            year: Annee de premiere diffusion optionnelle

        Returns:
            Liste de SearchResult (vide si aucun resultat)
        """
        params = {"query": query, "language": self._language, "include_adult": "false"}
        if year:
            params["first_air_date_year"] = str(year)
        return await self._search("/search/tv", f"tmdb:search_tv:{query}:{year}", params)

    async def _search(
        self, endpoint: str, cache_key: str, params: dict[str, str]
    ) -> list[SearchResult]:
        """Recherche commune films/series avec cache."""
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        response = await request_with_retry(
            self._get_client(), "GET", endpoint, params=params
        )
        data = response.json()

        results = [self._to_search_result(item) for item in data.get("results", [])]
        logger.debug("Recherche TMDB", endpoint=endpoint, query=params["query"], count=len(results))

        await self._cache.set_search(cache_key, results)
        return results

    def _to_search_result(self, item: dict[str, Any]) -> SearchResult:
        """Convertit un resultat brut (film ou serie) en SearchResult."""
        # Les films utilisent title/release_date, les series name/first_air_date
        title = item.get("title") or item.get("name") or ""
        original_title = item.get("original_title") or item.get("original_name")
        release_date = item.get("release_date") or item.get("first_air_date")

        return SearchResult(
            id=str(item["id"]),
            title=title or original_title or "",
            original_title=original_title if original_title != title else None,
            year=_year_from_date(release_date),
            poster_path=item.get("poster_path"),
            vote_average=item.get("vote_average"),
            source=self.source,
        )

    async def get_movie(self, movie_id: str) -> Optional[CatalogMatch]:
        """
        Recupere les details d'un film, dont son ID IMDb.

        Args:
            movie_id: ID TMDB du film

        Returns:
            CatalogMatch, ou None si non trouve (404)
        """
        cache_key = f"tmdb:movie:{movie_id}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                f"/movie/{movie_id}",
                params={"language": self._language},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        data = response.json()
        match = CatalogMatch(
            id=str(data["id"]),
            title=data.get("title") or data.get("original_title", ""),
            year=_year_from_date(data.get("release_date")),
            media_type=MediaType.MOVIE,
            poster_path=data.get("poster_path"),
            vote_average=data.get("vote_average"),
            vote_count=data.get("vote_count"),
            imdb_id=data.get("imdb_id") or None,
        )

        await self._cache.set_details(cache_key, match)
        return match

    async def get_tv_external_ids(self, tv_id: str) -> Optional[dict[str, Any]]:
        """
        Recupere les IDs externes (IMDb, TVDB) d'une serie.

        Args:
            tv_id: ID TMDB de la serie

        Returns:
            Dictionnaire {"imdb_id", "tvdb_id"}, ou None si non trouve
        """
        try:
            response = await request_with_retry(
                self._get_client(), "GET", f"/tv/{tv_id}/external_ids"
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        data = response.json()
        return {
            "imdb_id": data.get("imdb_id") or None,
            "tvdb_id": data.get("tvdb_id"),
        }

    async def get_tv(self, tv_id: str) -> Optional[CatalogMatch]:
        """
        Recupere les details d'une serie TV, dont son ID IMDb.

        Args:
            tv_id: ID TMDB de la serie

        Returns:
            CatalogMatch, ou None si non trouvee (404)
        """
        cache_key = f"tmdb:tv:{tv_id}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                f"/tv/{tv_id}",
                params={"language": self._language},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        data = response.json()
        external_ids = await self.get_tv_external_ids(str(data["id"])) or {}

        match = CatalogMatch(
            id=str(data["id"]),
            title=data.get("name") or data.get("original_name", ""),
            year=_year_from_date(data.get("first_air_date")),
            media_type=MediaType.SERIES,
            poster_path=data.get("poster_path"),
            vote_average=data.get("vote_average"),
            vote_count=data.get("vote_count"),
            imdb_id=external_ids.get("imdb_id"),
        )

        await self._cache.set_details(cache_key, match)
        return match

    async def find_movie(
        self,
        title: str,
        year: Optional[int] = None,
        tmdb_id: Optional[str] = None,
    ) -> Optional[CatalogMatch]:
        """
        Retrouve un film : par ID TMDB si fourni, sinon premier resultat de recherche.

        Args:
            title: Titre du film
            year: Annee de sortie optionnelle
            tmdb_id: ID TMDB connu (depuis le nom du dossier)

        Returns:
            CatalogMatch avec ID IMDb, ou None si non trouve
        """
        if tmdb_id:
            return await self.get_movie(tmdb_id)

        results = await self.search_movie(title, year)
        if not results:
            return None
        # Le premier resultat est le plus pertinent selon TMDB
        return await self.get_movie(results[0].id)

    async def find_show(
        self,
        title: str,
        year: Optional[int] = None,
        tmdb_id: Optional[str] = None,
    ) -> Optional[CatalogMatch]:
        """
        Retrouve une serie : par ID TMDB si fourni, sinon premier resultat de recherche.

        Args:
            title: Titre de la serie
            year: Annee de premiere diffusion optionnelle
            tmdb_id: ID TMDB connu (depuis le nom du dossier)

        Returns:
            CatalogMatch avec ID IMDb, ou None si non trouvee
        """
        if tmdb_id:
            return await self.get_tv(tmdb_id)

        results = await self.search_tv(title, year)
        if not results:
            return None

        show = results[0]
        external_ids = await self.get_tv_external_ids(show.id) or {}
        return CatalogMatch(
            id=show.id,
            title=show.title,
            year=show.year,
            media_type=MediaType.SERIES,
            poster_path=show.poster_path,
            vote_average=show.vote_average,
            imdb_id=external_ids.get("imdb_id"),
        )

    def poster_url(self, poster_path: str, size: str = "w780") -> str:
        """Construit l'URL publique d'un poster (ex: .../t/p/w780/abc.jpg)."""
        return f"{self.TMDB_IMAGE_BASE_URL}/{size}{poster_path}"

    async def download_poster(self, poster_path: str, size: str = "w780") -> bytes:
        """
        Telecharge l'image d'un poster depuis le CDN TMDB.

        Args:
            poster_path: Chemin du poster (ex: "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg")
            size: Taille TMDB (w500, w780, original)

        Returns:
            Octets de l'image encodee (JPEG)
        """
        cache_key = f"tmdb:poster:{size}{poster_path}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        response = await request_with_retry(
            self._get_image_client(), "GET", f"/{size}{poster_path}"
        )
        content = response.content
        logger.debug("Poster telecharge", path=poster_path, size=size, bytes=len(content))

        await self._cache.set_poster(cache_key, content)
        return content

    async def close(self) -> None:
        """
        Ferme les clients HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        for client in (self._client, self._image_client):
            if client is not None and not client.is_closed:
                await client.aclose()
        self._client = None
        self._image_client = None
