"""
Interfaces ports pour les clients API.

Interface abstraite (port) définissant le contrat de récupération du catalogue
de films. L'implémentation concrète (adaptateur httpx) se trouve dans
adapters/api/films_client.py.
"""

from abc import ABC, abstractmethod

from filmstats.core.entities.film import FilmCatalog


class CatalogFetchError(Exception):
    """
    Exception levée quand la récupération du catalogue échoue.

    Couvre les erreurs réseau, les statuts HTTP en erreur et les erreurs
    de décodage JSON. L'exception d'origine est chaînée (__cause__).
    """


class IFilmCatalogClient(ABC):
    """
    Interface de récupération du catalogue de films.

    Une implémentation effectue un seul appel, sans retry.
    """

    @abstractmethod
    async def fetch_catalog(self) -> FilmCatalog:
        """
        Récupère le catalogue complet depuis le service distant.

        Retourne :
            Le catalogue dans l'ordre renvoyé par le service

        Lève :
            CatalogFetchError : en cas d'erreur de transport ou de décodage
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau du client."""
        ...
