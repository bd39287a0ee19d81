"""
Interfaces ports pour les collaborateurs du catalogue.

Deux collaborateurs externes sont vus par le domaine uniquement a travers
leur interface:
- ICacheStore : table cle/valeur opaque (Redis, diskcache, memoire)
- ICatalogFetcher : API distante retournant des corps de reponse texte
"""

from abc import ABC, abstractmethod
from typing import Optional


class ICacheStore(ABC):
    """
    Stockage cle/valeur externe.

    La persistence, l'eviction et l'expiration appartiennent entierement
    a l'implementation. Une valeur absente est signalee par None.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Recupere une valeur.

        Args :
            key : Cle de l'entree

        Retourne :
            La valeur stockee, ou None si absente
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Stocke (ou ecrase) une valeur.

        Args :
            key : Cle de l'entree
            value : Document brut a stocker
        """
        ...


class ICatalogFetcher(ABC):
    """
    API de contenu distante.

    Recoit un chemin de ressource relatif a l'URL de base et retourne le
    corps complet de la reponse sous forme de texte. L'authentification
    et le rate limiting sont geres par l'implementation.
    """

    @abstractmethod
    async def fetch_text(self, path: str) -> str:
        """
        Execute un GET et retourne le corps de la reponse.

        Args :
            path : Chemin de la ressource (ex: "movie/popular")

        Retourne :
            Corps de la reponse en texte brut
        """
        ...

    @property
    @abstractmethod
    def listing_path(self) -> str:
        """Chemin de la collection des films populaires."""
        ...

    @abstractmethod
    def detail_path(self, media_id: str) -> str:
        """Chemin du document de detail d'un film."""
        ...
