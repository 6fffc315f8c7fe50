"""
Relance des requetes vers l'API catalogue en cas de limitation de debit.

Les reponses 429 sont converties en RateLimitError et relancees avec un
backoff exponentiel avec jitter (tenacity). Une fois les tentatives
epuisees, RateLimitError remonte a l'appelant.

Usage:
    response = await request_with_retry(client, "GET", url, max_attempts=3)
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
    L'API a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Delai annonce par le header Retry-After (secondes),
                     None si absent ou illisible
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After exprime en secondes."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _log_retry(state: RetryCallState) -> None:
    logger.debug("Catalogue limite en debit, nouvelle tentative", attempt=state.attempt_number)


def with_retry(max_attempts: int = 3, max_wait: float = 30, min_wait: float = 1):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives (secondes)
        min_wait: Delai minimum entre deux tentatives (secondes)
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=min_wait, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: float = 30,
    min_wait: float = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP, relancee sur 429.

    Les autres statuts d'erreur sont leves immediatement
    (httpx.HTTPStatusError), sans relance.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL (relative a base_url du client ou absolue)
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives (secondes)
        min_wait: Delai minimum entre deux tentatives (secondes)
        **kwargs: Arguments passes a client.request()

    Raises:
        RateLimitError: 429 persistant apres max_attempts tentatives
        httpx.HTTPStatusError: Autre statut d'erreur
        httpx.TransportError: Echec reseau
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait, min_wait=min_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
