"""
Couche application (services).

- CatalogService : recuperation unique et cache du catalogue
- FilmStatsService : statistiques par realisateur sur le catalogue en cache
"""

from filmstats.services.catalog import CatalogService
from filmstats.services.film_stats import DirectorReport, FilmStatsService

__all__ = [
    "CatalogService",
    "DirectorReport",
    "FilmStatsService",
]
