"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- IFilmCatalogClient : Récupération du catalogue de films
- CatalogFetchError : Échec de transport ou de décodage du catalogue
"""

from filmstats.core.ports.api_clients import CatalogFetchError, IFilmCatalogClient

__all__ = [
    "CatalogFetchError",
    "IFilmCatalogClient",
]
