"""
Relance des requetes TMDB limitees en debit (HTTP 429).

Seules les reponses 429 sont relancees: les autres erreurs HTTP et les
erreurs reseau remontent immediatement a l'appelant. Le delai respecte
l'en-tete Retry-After quand l'API le fournit, sinon un backoff
exponentiel avec jitter est applique.

Usage:
    response = await request_with_retry(client, "GET", "movie/popular")
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
    Levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (en-tete Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class wait_retry_after:
    """
    Strategie d'attente tenacity basee sur Retry-After.

    Utilise la valeur annoncee par l'API (bornee par max_wait) et se
    rabat sur un backoff exponentiel aleatoire sinon.
    """

    def __init__(self, max_wait: int) -> None:
        self._max_wait = max_wait
        self._fallback = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(error.retry_after, self._max_wait))
        return self._fallback(retry_state)


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        "Rate limit TMDB, nouvelle tentative",
        attempt=retry_state.attempt_number,
        wait=retry_state.next_action.sleep if retry_state.next_action else None,
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre deux tentatives en secondes (defaut: 60)

    Returns:
        Decorateur tenacity; la derniere RateLimitError est re-levee
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en relancant les reponses 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL absolue ou relative au base_url du client
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives en secondes
        **kwargs: Arguments passes a client.request()

    Returns:
        httpx.Response avec un statut 2xx

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres statuts d'erreur
        httpx.TransportError: Si la connexion echoue
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            header = response.headers.get("Retry-After")
            raise RateLimitError(int(header) if header and header.isdigit() else None)
        response.raise_for_status()
        return response

    return await _do_request()
