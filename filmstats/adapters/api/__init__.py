"""
Clients API externes.

Ce module fournit l'adaptateur pour communiquer avec le service Films.
Le client implemente IFilmCatalogClient defini dans core/ports/api_clients.py.
"""

from filmstats.adapters.api.films_client import FilmsAPIClient

__all__ = [
    "FilmsAPIClient",
]
