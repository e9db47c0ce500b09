"""
Clients API externes pour les posters et les notes.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database, catalogue des films/series et poster de base
- OMDb: notes IMDb, Rotten Tomatoes et Metacritic

Infrastructure partagee:
- APICache: Cache persistant avec TTL differencies (recherche 24h, details 7j)
- RateLimitError: Exception pour les erreurs 429
- with_retry: Decorateur avec backoff exponentiel pour gerer le rate limiting

Les clients implementent ICatalogClient et IRatingsClient definis dans
core/ports/api_clients.py.
"""

from src.adapters.api.cache import APICache
from src.adapters.api.omdb_client import OMDbClient
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "OMDbClient",
    "RateLimitError",
    "TMDBClient",
    "request_with_retry",
    "with_retry",
]
