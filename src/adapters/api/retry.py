"""
Mecanisme de retry avec backoff exponentiel pour les API externes.

Gere automatiquement les erreurs 429 (rate limiting) de TMDB et OMDb en
relancant les requetes avec un delai croissant et du jitter aleatoire.
Chaque nouvelle tentative est journalisee via loguru.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
        url: URL de la requete limitee, si connue
    """

    def __init__(self, retry_after: Optional[int] = None, url: Optional[str] = None) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            retry_after: Secondes a attendre avant de relancer (optionnel)
            url: URL de la requete limitee (optionnel)
        """
        self.retry_after = retry_after
        self.url = url
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(retry_state: RetryCallState) -> None:
    """Journalise une nouvelle tentative apres un 429."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Rate limit atteint, nouvelle tentative",
        attempt=retry_state.attempt_number,
        url=getattr(error, "url", None),
    )


def public_url(url: httpx.URL) -> str:
    """URL sans query string (les cles API y sont passees en parametre)."""
    return str(url.copy_with(query=None))


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Convertit le header Retry-After en secondes (None si absent ou date HTTP)."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Utilise wait_random_exponential pour ajouter du jitter et eviter
    que plusieurs traitements relancent en meme temps.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres erreurs HTTP (4xx, 5xx) sont
    propagees immediatement sans retry.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (absolue ou relative a base_url)
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(
                _parse_retry_after(response.headers.get("Retry-After")),
                url=public_url(response.request.url),
            )
        response.raise_for_status()
        return response

    return await _do_request()
