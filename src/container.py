"""
Container d'injection de dependances via dependency-injector.

Assemble le client TMDB, le stockage de cache choisi par configuration
et les services du catalogue.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache, InMemoryCacheStore, RedisCacheStore
from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .services.catalog import CatalogService
from .services.detail_cache import DetailCache


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog_service()
        ids = await catalog.get_popular_movie_ids()
    """

    config = providers.Singleton(Settings)

    # Stockage de cache selon config.cache_backend
    cache_store = providers.Selector(
        providers.Callable(lambda settings: settings.cache_backend, config),
        redis=providers.Singleton(
            RedisCacheStore,
            url=config.provided.redis_url,
            ttl=config.provided.cache_ttl,
        ),
        disk=providers.Singleton(
            APICache,
            cache_dir=providers.Callable(str, config.provided.cache_dir),
            ttl=config.provided.cache_ttl,
        ),
        memory=providers.Singleton(InMemoryCacheStore),
    )

    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )

    detail_cache = providers.Factory(
        DetailCache,
        fetcher=tmdb_client,
        cache=cache_store,
        coalesce=config.provided.coalesce_fetches,
    )

    catalog_service = providers.Factory(
        CatalogService,
        fetcher=tmdb_client,
        details=detail_cache,
        id_marker=config.provided.id_marker,
    )
