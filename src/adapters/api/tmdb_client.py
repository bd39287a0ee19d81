"""
Client texte pour l'API TMDB (The Movie Database).

Implemente ICatalogFetcher: chaque appel est un GET sur
base + chemin + "?api_key=<cle>" dont le corps est retourne en texte brut,
sans parsing JSON.

Usage:
    client = TMDBClient(api_key="your_key")
    listing = await client.fetch_text(client.listing_path)
    document = await client.fetch_text(client.detail_path("550"))
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from src.adapters.api.retry import request_with_retry
from src.core.ports.catalog import ICatalogFetcher


class TMDBClient(ICatalogFetcher):
    """
    Client API TMDB retournant des documents bruts.

    Les erreurs ne sont pas interceptees:
    - httpx.TransportError si la connexion ou la lecture echoue
    - httpx.HTTPStatusError pour un statut 4xx/5xx
    - RateLimitError si le 429 persiste apres les relances

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        LISTING_PATH: Chemin de la collection des films populaires
        DETAIL_PREFIX: Prefixe du chemin de detail d'un film
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3/"
    LISTING_PATH = "movie/popular"
    DETAIL_PREFIX = "movie/"

    def __init__(
        self,
        api_key: str,
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3 (passee dans la query string)
            base_url: URL de base de l'API
            timeout: Timeout HTTP en secondes
            max_attempts: Tentatives maximum sur rate limiting (429)
        """
        self._api_key = api_key
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                params={"api_key": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    @property
    def listing_path(self) -> str:
        return self.LISTING_PATH

    def detail_path(self, media_id: str) -> str:
        return f"{self.DETAIL_PREFIX}{media_id}"

    async def fetch_text(self, path: str) -> str:
        """
        Recupere une ressource TMDB sous forme de texte.

        Args:
            path: Chemin relatif a l'URL de base (ex: "movie/550")

        Returns:
            Corps complet de la reponse
        """
        logger.debug("GET TMDB", path=path)
        response = await request_with_retry(
            self._get_client(), "GET", path, max_attempts=self._max_attempts
        )
        return response.text

    async def close(self) -> None:
        """Ferme le client HTTP (a appeler a la fin de l'utilisation)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
