"""
Service du catalogue de films populaires.

Compose l'API distante, l'extracteur de champs et le cache de details:
- get_popular_movie_ids : identifiants de la liste, ordre d'apparition inverse
- get_details_by_id : document de detail via le cache-aside
"""

from loguru import logger

from src.core.ports.catalog import ICatalogFetcher
from src.services.detail_cache import DetailCache
from src.services.field_scanner import scan_for_key_values

DEFAULT_ID_MARKER = '"id":'


class CatalogService:
    """
    Point d'entree applicatif pour le catalogue.

    La liste des populaires n'est jamais mise en cache: elle est
    recalculee a chaque appel.
    """

    def __init__(
        self,
        fetcher: ICatalogFetcher,
        details: DetailCache,
        id_marker: str = DEFAULT_ID_MARKER,
    ) -> None:
        """
        Initialise le service.

        Args:
            fetcher: API distante du catalogue
            details: Cache-aside des documents de detail
            id_marker: Marqueur precedant chaque identifiant dans la liste
        """
        self._fetcher = fetcher
        self._details = details
        self._id_marker = id_marker

    async def get_popular_movie_ids(self) -> list[str]:
        """
        Recupere les identifiants des films populaires.

        Les identifiants sont extraits de gauche a droite puis la liste est
        inversee telle quelle: le dernier identifiant du payload sort en
        premier. Aucun classement n'est deduit du contenu (champ popularity).

        Returns:
            Identifiants en ordre d'apparition inverse (liste vide si aucun)
        """
        listing = await self._fetcher.fetch_text(self._fetcher.listing_path)
        ids = scan_for_key_values(self._id_marker, listing)
        ids.reverse()
        logger.debug("Liste des populaires recuperee", count=len(ids))
        return ids

    async def get_details_by_id(self, media_id: str) -> str:
        """Retourne le document de detail d'un film (via le cache)."""
        return await self._details.get_details(media_id)
