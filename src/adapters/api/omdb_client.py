"""
Client OMDb pour les notes IMDb, Rotten Tomatoes et Metacritic.

Implemente l'interface IRatingsClient. OMDb repond toujours en HTTP 200 ;
un titre inconnu est signale par "Response": "False" dans le corps.

Usage:
    client = OMDbClient(api_key="your_key", cache=APICache())
    ratings = await client.get_ratings("tt0499549")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.cache import APICache
from src.adapters.api.retry import RateLimitError, public_url, request_with_retry
from src.core.ports.api_clients import IRatingsClient
from src.core.value_objects.ratings import RatingSet

# Noms des sources dans le tableau "Ratings" d'OMDb
_RT_SOURCE = "Rotten Tomatoes"
_METACRITIC_SOURCE = "Metacritic"


class OMDbClient(IRatingsClient):
    """
    Client API OMDb.

    - Recherche par ID IMDb (parametre i) ou par titre/annee (t, y)
    - Normalisation en RatingSet ("N/A" absent, "%" et "/100" retires)
    - Cache persistant 3 jours, retry sur 429
    """

    OMDB_BASE_URL = "https://www.omdbapi.com"

    def __init__(self, api_key: str, cache: APICache) -> None:
        self._api_key = api_key
        self._cache = cache
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.OMDB_BASE_URL,
                params={"apikey": self._api_key},
                timeout=30.0,
            )
        return self._client

    @property
    def source(self) -> str:
        return "omdb"

    async def get_ratings(self, imdb_id: str) -> Optional[RatingSet]:
        """
        Recupere les notes d'un titre par son ID IMDb.

        Args:
            imdb_id: ID IMDb (ex: "tt0499549")

        Returns:
            RatingSet normalise, ou None si OMDb ne connait pas le titre
            ou ne repond pas
        """
        return await self._fetch(f"omdb:ratings:{imdb_id}", {"i": imdb_id}, imdb_id)

    async def search_by_title(
        self, title: str, year: Optional[int] = None
    ) -> Optional[RatingSet]:
        """
        Recupere les notes par titre (repli quand aucun ID IMDb n'est connu).

        Args:
            title: Titre exact du film ou de la serie
            year: Annee optionnelle pour desambiguiser

        Returns:
            RatingSet normalise, ou None si non trouve ou OMDb indisponible
        """
        params = {"t": title}
        if year:
            params["y"] = str(year)
        return await self._fetch(f"omdb:title:{title}:{year}", params, title)

    async def _fetch(
        self, cache_key: str, params: dict[str, str], label: str
    ) -> Optional[RatingSet]:
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        # Panne OMDb : poster sans les notes OMDb
        try:
            response = await request_with_retry(self._get_client(), "GET", "/", params=params)
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "OMDb indisponible",
                query=label,
                status=e.response.status_code,
                url=public_url(e.request.url),
            )
            return None
        except (httpx.HTTPError, RateLimitError, ValueError) as e:
            logger.warning("OMDb indisponible", query=label, error=type(e).__name__)
            return None

        if data.get("Response") == "False":
            logger.warning("OMDb: titre inconnu", query=label, error=data.get("Error"))
            return None

        ratings = self._parse_ratings(data)
        await self._cache.set_ratings(cache_key, ratings)
        return ratings

    @staticmethod
    def _parse_ratings(data: dict[str, Any]) -> RatingSet:
        """Convertit une reponse OMDb brute en RatingSet normalise."""
        by_source = {
            entry.get("Source"): entry.get("Value")
            for entry in data.get("Ratings") or []
        }

        metacritic = data.get("Metascore")
        if not metacritic or metacritic == "N/A":
            # Certaines reponses n'ont la note que dans le tableau ("74/100")
            metacritic = by_source.get(_METACRITIC_SOURCE)

        return RatingSet.from_raw(
            imdb_rating=data.get("imdbRating"),
            imdb_votes=data.get("imdbVotes"),
            rotten_tomatoes=by_source.get(_RT_SOURCE),
            metacritic=metacritic,
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
