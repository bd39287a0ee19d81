"""
Cache-aside pour les documents de detail du catalogue.

Le cache est consulte avant tout appel reseau. En cas d'absence, le
document est recupere depuis l'API distante, ecrit dans le cache puis
retourne. Un echec de recuperation remonte tel quel et rien n'est ecrit.
"""

import asyncio
from functools import partial
from typing import Optional

from loguru import logger

from src.core.ports.catalog import ICacheStore, ICatalogFetcher


class DetailCache:
    """
    Acces aux documents de detail avec verification du cache.

    Sans coalescence (defaut), deux appels concurrents pour le meme
    identifiant absent du cache font chacun leur requete et ecrivent
    chacun le resultat: la derniere ecriture gagne.

    Avec coalesce=True, les appels concurrents pour un meme identifiant
    absent partagent une seule requete (single-flight, par processus).

    Example:
        details = DetailCache(fetcher=tmdb_client, cache=RedisCacheStore())
        document = await details.get_details("550")
    """

    def __init__(
        self,
        fetcher: ICatalogFetcher,
        cache: ICacheStore,
        coalesce: bool = False,
    ) -> None:
        """
        Initialise le cache de details.

        Args:
            fetcher: API distante du catalogue
            cache: Stockage cle/valeur des documents
            coalesce: Partage une seule requete entre appels concurrents
        """
        self._fetcher = fetcher
        self._cache = cache
        self._coalesce = coalesce
        self._inflight: dict[str, asyncio.Task] = {}

    async def get_details(self, media_id: str) -> str:
        """
        Retourne le document de detail d'un film.

        Args:
            media_id: Identifiant du film (passe tel quel a l'API)

        Returns:
            Document brut, depuis le cache ou depuis l'API
        """
        cached: Optional[str] = await self._cache.get(media_id)
        if cached is not None:
            logger.debug("Cache hit", media_id=media_id)
            return cached

        logger.debug("Cache miss", media_id=media_id)
        if not self._coalesce:
            return await self._fetch_and_store(media_id)

        task = self._inflight.get(media_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(media_id))
            self._inflight[media_id] = task
            task.add_done_callback(partial(self._finish_inflight, media_id))
        else:
            logger.debug("Requete deja en cours, attente", media_id=media_id)
        # shield: l'annulation d'un appelant ne doit pas annuler les autres
        return await asyncio.shield(task)

    def _finish_inflight(self, media_id: str, task: asyncio.Task) -> None:
        """Libere l'entree en cours et consomme l'erreur si plus personne n'attend."""
        self._inflight.pop(media_id, None)
        if not task.cancelled() and task.exception() is not None:
            logger.debug("Echec de la requete partagee", media_id=media_id)

    async def _fetch_and_store(self, media_id: str) -> str:
        """Recupere le document depuis l'API puis l'ecrit dans le cache."""
        document = await self._fetcher.fetch_text(self._fetcher.detail_path(media_id))
        await self._cache.set(media_id, document)
        return document
