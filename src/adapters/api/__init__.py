"""
Adaptateurs vers les collaborateurs externes du catalogue.

- TMDBClient : API TMDB, documents retournes en texte brut
- RedisCacheStore / APICache / InMemoryCacheStore : stockages de cache
- RateLimitError / with_retry / request_with_retry : relance sur HTTP 429

Les adaptateurs implementent les ports definis dans core/ports/catalog.py.
"""

from src.adapters.api.cache import APICache, InMemoryCacheStore, RedisCacheStore
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
    "TMDBClient",
]
