"""
Entités métier du domaine.

Exports:
- Film: Fiche immuable d'un film du catalogue
- FilmCatalog: Sequence ordonnee de Film, recuperee une seule fois
"""

from filmstats.core.entities.film import Film, FilmCatalog

__all__ = [
    "Film",
    "FilmCatalog",
]
