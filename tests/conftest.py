"""
Fixtures pytest partagees pour les tests MovieCache.

- Mocks des ports (ICatalogFetcher, ICacheStore)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.api.cache import InMemoryCacheStore
from src.core.ports.catalog import ICacheStore, ICatalogFetcher
from tests.fixtures.tmdb_responses import (
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_POPULAR_RESPONSE,
)


@pytest.fixture
def mock_fetcher() -> MagicMock:
    """
    Mock de ICatalogFetcher.

    fetch_text retourne la liste des populaires pour "movie/popular" et
    le document de detail pour tout autre chemin. Le compteur d'appels
    est disponible via mock_fetcher.fetch_text.await_count.
    """
    mock = MagicMock(spec=ICatalogFetcher)
    mock.listing_path = "movie/popular"
    mock.detail_path.side_effect = lambda media_id: f"movie/{media_id}"

    async def default_fetch(path: str) -> str:
        if path == "movie/popular":
            return TMDB_POPULAR_RESPONSE
        return TMDB_MOVIE_DETAILS_RESPONSE

    mock.fetch_text = AsyncMock(side_effect=default_fetch)
    return mock


@pytest.fixture
def mock_cache() -> AsyncMock:
    """Mock de ICacheStore (cache miss par defaut)."""
    cache = AsyncMock(spec=ICacheStore)
    cache.get.return_value = None
    return cache


@pytest.fixture
def memory_cache() -> InMemoryCacheStore:
    """Stockage en memoire reel, vide."""
    return InMemoryCacheStore()
