"""
Stockages de cache pour les documents du catalogue.

Trois implementations de ICacheStore, interchangeables:
- RedisCacheStore : serveur Redis partage (defaut, redis://127.0.0.1:6379/0)
- APICache : cache persistant sur disque via diskcache
- InMemoryCacheStore : dictionnaire en memoire (tests, executions locales)

L'expiration eventuelle (ttl) est appliquee par le stockage lui-meme;
les services ne verifient jamais l'age d'une entree.
"""

import asyncio
from functools import partial
from typing import Optional

import redis.asyncio as aioredis
from diskcache import Cache

from src.core.ports.catalog import ICacheStore


class RedisCacheStore(ICacheStore):
    """
    Cache cle/valeur sur un serveur Redis.

    Les erreurs de connexion ou de commande (redis.exceptions.RedisError)
    remontent telles quelles a l'appelant.

    Example:
        cache = RedisCacheStore("redis://127.0.0.1:6379/0")
        await cache.set("550", document)
        document = await cache.get("550")
        await cache.close()
    """

    def __init__(
        self,
        url: str = "redis://127.0.0.1:6379/0",
        ttl: Optional[int] = None,
        client: Optional[aioredis.Redis] = None,
    ) -> None:
        """
        Initialise la connexion Redis (etablie paresseusement au premier appel).

        Args:
            url: URL du serveur Redis
            ttl: Duree de vie des entrees en secondes (None = pas d'expiration)
            client: Client Redis deja construit (remplace url)
        """
        self._client = client or aioredis.from_url(url, decode_responses=True)
        self._ttl = ttl

    async def get(self, key: str) -> Optional[str]:
        return await self._client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value, ex=self._ttl)

    async def close(self) -> None:
        """Ferme le pool de connexions."""
        await self._client.aclose()


class APICache(ICacheStore):
    """
    Cache persistant sur disque.

    Utilise diskcache pour conserver les documents entre les redemarrages
    et run_in_executor pour ne pas bloquer la boucle d'evenements.

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set("550", document)
        document = await cache.get("550")
    """

    def __init__(self, cache_dir: str = ".cache/api", ttl: Optional[int] = None) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
            ttl: Duree de vie des entrees en secondes (None = pas d'expiration)
        """
        self._cache = Cache(cache_dir)
        self._ttl = ttl

    async def get(self, key: str) -> Optional[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=self._ttl)
        )

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    async def close(self) -> None:
        """Ferme le cache (a appeler a la fin)."""
        self._cache.close()


class InMemoryCacheStore(ICacheStore):
    """Cache dans un dictionnaire, limite a la duree du processus."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    async def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    async def close(self) -> None:
        """Rien a liberer: les entrees restent disponibles."""
