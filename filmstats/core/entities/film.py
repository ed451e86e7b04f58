"""
Entité Film du catalogue.

Représente une fiche de film telle que renvoyée par le service Films.
La fiche est immuable : le catalogue n'est jamais modifié après sa récupération.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

RELEASE_DATE_FORMAT = "%Y-%m-%d"
# strptime accepte "2006-6-16" ou "2006-11- 9" : on exige des champs de largeur fixe
RELEASE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _lookup(item: dict[str, Any], key: str) -> Any:
    """Valeur de la cle, la correspondance exacte etant prioritaire sur la casse ignoree."""
    if key in item:
        return item[key]
    folded = key.casefold()
    for candidate, value in item.items():
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return value
    return None


def _string_field(item: dict[str, Any], key: str) -> str:
    value = _lookup(item, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Champ '{key}' invalide: chaine attendue, recu {value!r}")
    return value


def _int_field(item: dict[str, Any], key: str) -> int:
    value = _lookup(item, key)
    if value is None:
        return 0
    # bool est une sous-classe de int, on le refuse explicitement
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Champ '{key}' invalide: entier attendu, recu {value!r}")
    return value


def _float_field(item: dict[str, Any], key: str) -> float:
    value = _lookup(item, key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Champ '{key}' invalide: nombre attendu, recu {value!r}")
    return float(value)


@dataclass(frozen=True)
class Film:
    """
    Fiche d'un film du catalogue.

    Attributes:
        name: Titre affiche (pas forcement unique)
        length: Duree en minutes
        rating: Note du film
        release_date: Date de sortie au format ISO YYYY-MM-DD
        director_name: Nom du realisateur, cle de regroupement (aucune normalisation)
    """

    name: str = ""
    length: int = 0
    rating: float = 0.0
    release_date: str = ""
    director_name: str = ""

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Film":
        """
        Construit un Film depuis un objet JSON de l'API.

        Les cles sont lues sans tenir compte de la casse (releasedate, DirectorName...).
        Les cles absentes (ou null) prennent la valeur zero du champ.
        Une valeur du mauvais type JSON leve ValueError.

        Args:
            item: Objet JSON avec les cles name, length, rating, releaseDate, directorName

        Returns:
            Film correspondant

        Raises:
            ValueError: Si item n'est pas un objet ou si un champ est mal type
        """
        if not isinstance(item, dict):
            raise ValueError(f"Objet film attendu, recu {type(item).__name__}")

        return cls(
            name=_string_field(item, "name"),
            length=_int_field(item, "length"),
            rating=_float_field(item, "rating"),
            release_date=_string_field(item, "releaseDate"),
            director_name=_string_field(item, "directorName"),
        )

    def release_day(self) -> Optional[date]:
        """Retourne la date de sortie, ou None si elle n'est pas au format YYYY-MM-DD."""
        if not RELEASE_DATE_PATTERN.fullmatch(self.release_date):
            return None
        try:
            return datetime.strptime(self.release_date, RELEASE_DATE_FORMAT).date()
        except ValueError:
            return None


# Catalogue ordonne, jamais modifie apres la recuperation
FilmCatalog = tuple[Film, ...]
