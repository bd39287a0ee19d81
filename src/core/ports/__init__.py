"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

- ICacheStore : Stockage cle/valeur des documents de detail
- ICatalogFetcher : API distante du catalogue de films
"""

from src.core.ports.catalog import ICacheStore, ICatalogFetcher

__all__ = [
    "ICacheStore",
    "ICatalogFetcher",
]
