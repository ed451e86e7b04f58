"""
Service de statistiques sur le catalogue de films.

Ce module fournit des fonctions pures d'agregation par realisateur,
et une facade async (FilmStatsService) qui les applique au catalogue
en cache.

Statistiques disponibles:
- Film le mieux note d'un realisateur
- Realisateur ayant le plus de films
- Note moyenne d'un realisateur (arrondie a 1 decimale, demi vers le haut)
- Plus petit ecart en jours entre deux sorties consecutives d'un realisateur

Aucune agregation ne leve d'exception: l'absence de donnees donne
"", 0 ou 0.0.
"""

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from filmstats.core.entities.film import Film
from filmstats.services.catalog import CatalogService


# ====================
# Fonctions pures
# ====================


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Arrondit a `digits` decimales, les egalites s'eloignant de zero.

    round() de Python arrondit au pair (round(80.5) == 80), ce qui
    donnerait 8.0 pour une moyenne de 8.05.
    """
    factor = 10**digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def films_by_director(films: Sequence[Film], director_name: str) -> list[Film]:
    """Films du realisateur (correspondance exacte, sensible a la casse)."""
    return [film for film in films if film.director_name == director_name]


def best_rated_film(films: Sequence[Film], director_name: str) -> str:
    """
    Nom du film le mieux note du realisateur.

    En cas d'egalite, le premier film rencontre dans l'ordre du catalogue
    l'emporte.

    Returns:
        Nom du film, ou "" si le realisateur n'a aucun film
    """
    best = None
    for film in films_by_director(films, director_name):
        if best is None or film.rating > best.rating:
            best = film
    return best.name if best is not None else ""


def director_with_most_films(films: Sequence[Film]) -> str:
    """
    Realisateur ayant le plus de films dans tout le catalogue.

    En cas d'egalite, le premier realisateur rencontre dans le catalogue
    l'emporte. Ce departage n'est pas garanti par le service Films et ne
    doit pas etre considere comme un contrat.

    Returns:
        Nom du realisateur, ou "" si le catalogue est vide
    """
    counts = Counter(film.director_name for film in films)
    if not counts:
        return ""
    # most_common conserve l'ordre d'insertion entre egalites
    director, _ = counts.most_common(1)[0]
    return director


def average_rating(films: Sequence[Film], director_name: str) -> float:
    """
    Note moyenne des films du realisateur, arrondie a 1 decimale.

    Returns:
        Moyenne arrondie, ou 0.0 si le realisateur n'a aucun film
    """
    ratings = [film.rating for film in films_by_director(films, director_name)]
    if not ratings:
        return 0.0
    return round_half_up(sum(ratings) / len(ratings))


def shortest_release_gap(films: Sequence[Film], director_name: str) -> int:
    """
    Plus petit nombre de jours entre deux sorties consecutives du realisateur.

    Les dates qui ne sont pas au format YYYY-MM-DD sont ignorees.

    Returns:
        Ecart minimal en jours, ou 0 s'il y a moins de deux dates exploitables

    Example:
        Batman Begins (2006-06-16), Prestige (2006-11-10) et
        Interstellar (2014-11-07) donnent 147.
    """
    release_days = sorted(
        day
        for day in (film.release_day() for film in films_by_director(films, director_name))
        if day is not None
    )
    if len(release_days) < 2:
        return 0
    return min(
        (later - earlier).days
        for earlier, later in zip(release_days, release_days[1:])
    )


# ====================
# Facade sur le catalogue en cache
# ====================


@dataclass(frozen=True)
class DirectorReport:
    """
    Synthese des statistiques d'un realisateur.

    Attributes:
        director_name: Nom du realisateur
        film_count: Nombre de films dans le catalogue
        best_rated_film: Titre du film le mieux note ("" si aucun)
        average_rating: Note moyenne arrondie (0.0 si aucun)
        shortest_release_gap: Ecart minimal en jours (0 si moins de deux films)
    """

    director_name: str
    film_count: int
    best_rated_film: str
    average_rating: float
    shortest_release_gap: int


class FilmStatsService:
    """
    Statistiques par realisateur sur le catalogue en cache.

    Chaque methode obtient le catalogue via CatalogService.get_catalog(),
    ce qui declenche la recuperation au premier appel seulement.
    """

    def __init__(self, catalog_service: CatalogService) -> None:
        self._catalog_service = catalog_service

    async def best_rated_film(self, director_name: str) -> str:
        films = await self._catalog_service.get_catalog()
        return best_rated_film(films, director_name)

    async def director_with_most_films(self) -> str:
        films = await self._catalog_service.get_catalog()
        return director_with_most_films(films)

    async def average_rating(self, director_name: str) -> float:
        films = await self._catalog_service.get_catalog()
        return average_rating(films, director_name)

    async def shortest_release_gap(self, director_name: str) -> int:
        films = await self._catalog_service.get_catalog()
        return shortest_release_gap(films, director_name)

    async def director_report(self, director_name: str) -> DirectorReport:
        """Calcule toutes les statistiques d'un realisateur en une passe sur le cache."""
        films = await self._catalog_service.get_catalog()
        return DirectorReport(
            director_name=director_name,
            film_count=len(films_by_director(films, director_name)),
            best_rated_film=best_rated_film(films, director_name),
            average_rating=average_rating(films, director_name),
            shortest_release_gap=shortest_release_gap(films, director_name),
        )
