"""
Cache persistant pour les API externes avec TTL differencies.

Le cache utilise diskcache pour la persistence sur disque : relancer un
traitement complet d'une videotheque ne refait pas les recherches TMDB
ni les appels OMDb deja effectues.

TTL par defaut:
- Recherches (SEARCH_TTL): 24 heures - les resultats de recherche changent souvent
- Details (DETAILS_TTL): 7 jours - les metadonnees d'un film/serie changent rarement
- Notes (RATINGS_TTL): 3 jours - les notes evoluent avec les votes
- Posters (POSTER_TTL): 30 jours - les images du CDN sont stables
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels API.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes.

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set_search("tmdb:search_movie:inception:2010", results)
        data = await cache.get("tmdb:search_movie:inception:2010")
    """

    SEARCH_TTL = 24 * 60 * 60  # 24 heures en secondes (86400)
    DETAILS_TTL = 7 * 24 * 60 * 60  # 7 jours en secondes (604800)
    RATINGS_TTL = 3 * 24 * 60 * 60  # 3 jours en secondes (259200)
    POSTER_TTL = 30 * 24 * 60 * 60  # 30 jours en secondes (2592000)

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """
        Stocke une valeur dans le cache avec un TTL en secondes.
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke un resultat de recherche (TTL de 24h)."""
        await self.set(key, value, self.SEARCH_TTL)

    async def set_details(self, key: str, value: Any) -> None:
        """Stocke les details d'un media (TTL de 7 jours)."""
        await self.set(key, value, self.DETAILS_TTL)

    async def set_ratings(self, key: str, value: Any) -> None:
        """Stocke les notes d'un titre (TTL de 3 jours)."""
        await self.set(key, value, self.RATINGS_TTL)

    async def set_poster(self, key: str, value: bytes) -> None:
        """Stocke les octets d'un poster telecharge (TTL de 30 jours)."""
        await self.set(key, value, self.POSTER_TTL)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
