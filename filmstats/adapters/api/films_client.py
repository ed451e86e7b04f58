"""
Client HTTP du service Films.

Implemente IFilmCatalogClient : un unique GET authentifie par jeton Bearer,
dont le corps JSON est decode en liste de Film. Aucun retry : toute erreur
de transport ou de decodage est convertie en CatalogFetchError.

Usage:
    client = FilmsAPIClient(endpoint_url="https://.../films", api_token="xxx")
    catalog = await client.fetch_catalog()
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from filmstats.core.entities.film import Film, FilmCatalog
from filmstats.core.ports.api_clients import CatalogFetchError, IFilmCatalogClient


class FilmsAPIClient(IFilmCatalogClient):
    """
    Client API du service Films.

    Example:
        client = FilmsAPIClient(endpoint_url=settings.films_endpoint_url,
                                api_token=settings.api_token)
        try:
            films = await client.fetch_catalog()
        finally:
            await client.close()
    """

    def __init__(
        self,
        endpoint_url: str,
        api_token: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            endpoint_url: URL complete de l'endpoint /films
            api_token: Jeton envoye dans le header Authorization (Bearer)
            timeout: Timeout des requetes en secondes
        """
        self._endpoint_url = endpoint_url
        self._api_token = api_token
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._api_token:
                headers["Authorization"] = f"Bearer {self._api_token}"

            self._client = httpx.AsyncClient(headers=headers, timeout=self._timeout)
        return self._client

    async def fetch_catalog(self) -> FilmCatalog:
        """
        Recupere le catalogue complet.

        Un corps JSON null donne un catalogue vide.

        Returns:
            Tuple de Film dans l'ordre renvoye par l'API

        Raises:
            CatalogFetchError: Erreur reseau, statut HTTP en erreur,
                JSON invalide ou fiche mal typee
        """
        client = self._get_client()
        logger.debug(f"GET {self._endpoint_url}")

        try:
            response = await client.get(self._endpoint_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise CatalogFetchError(f"Echec de l'appel au service Films: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogFetchError(f"Reponse JSON invalide: {e}") from e

        if data is None:
            data = []
        if not isinstance(data, list):
            raise CatalogFetchError(
                f"Tableau JSON attendu, recu {type(data).__name__}"
            )

        try:
            films = tuple(Film.from_api(item) for item in data)
        except ValueError as e:
            raise CatalogFetchError(f"Fiche film invalide: {e}") from e

        logger.info(f"Catalogue recupere: {len(films)} films")
        return films

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
