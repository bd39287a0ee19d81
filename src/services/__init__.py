"""
Couche application (cas d'utilisation).

- field_scanner : extraction positionnelle des identifiants
- detail_cache : cache-aside des documents de detail
- catalog : composition liste des populaires + details

Les services dependent des ports de core/, jamais des adaptateurs.
"""

from src.services.catalog import CatalogService
from src.services.detail_cache import DetailCache
from src.services.field_scanner import scan_for_key_values

__all__ = [
    "CatalogService",
    "DetailCache",
    "scan_for_key_values",
]
