"""
Service de cache du catalogue de films.

Le catalogue est recupere au plus une fois pour toute la duree de vie
de l'instance (le container DI en fait un singleton de processus).

Comportement au premier appel de get_catalog():
- succes : le catalogue recu est conserve
- echec (CatalogFetchError) : l'erreur est journalisee puis ignoree,
  un catalogue vide est conserve definitivement

Les appelants concurrents pendant la recuperation, qu'ils soient des taches
de la meme boucle ou d'autres threads avec leur propre boucle, attendent sa
fin et observent tous le meme resultat. Ensuite, les lectures se font sans verrou.
"""

import asyncio
import threading
from concurrent.futures import Future
from typing import Optional

from loguru import logger

from filmstats.core.entities.film import FilmCatalog
from filmstats.core.ports.api_clients import CatalogFetchError, IFilmCatalogClient


class CatalogService:
    """
    Acces au catalogue de films avec recuperation unique.

    Le premier appelant effectue la recuperation dans sa propre boucle
    d'evenements. Les autres attendent un concurrent.futures.Future partage,
    via asyncio.wrap_future, ce qui fonctionne quelle que soit leur boucle.

    Example:
        service = CatalogService(client=FilmsAPIClient(...))
        films = await service.get_catalog()  # appel HTTP
        films = await service.get_catalog()  # valeur en cache
    """

    def __init__(self, client: IFilmCatalogClient) -> None:
        """
        Initialise le service.

        Args:
            client: Client implementant IFilmCatalogClient
        """
        self._client = client
        self._catalog: Optional[FilmCatalog] = None
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None

    @property
    def is_loaded(self) -> bool:
        """Indique si la premiere recuperation est terminee (succes ou echec)."""
        return self._catalog is not None

    async def get_catalog(self) -> FilmCatalog:
        """
        Retourne le catalogue, le recupere au premier appel uniquement.

        Returns:
            Le catalogue en cache, vide si la recuperation initiale a echoue
        """
        if self._catalog is not None:
            return self._catalog

        with self._lock:
            is_owner = self._pending is None
            if is_owner:
                self._pending = Future()
            pending = self._pending

        if not is_owner:
            return await asyncio.wrap_future(pending)

        try:
            catalog = await self._fetch_or_empty()
        except BaseException as e:
            # Les appelants en attente ne doivent pas rester bloques
            pending.set_exception(e)
            raise
        self._catalog = catalog
        pending.set_result(catalog)
        return catalog

    async def _fetch_or_empty(self) -> FilmCatalog:
        try:
            return await self._client.fetch_catalog()
        except CatalogFetchError as e:
            # Pas de retry ni de remontee : le catalogue vide reste en cache
            logger.warning(f"Recuperation du catalogue impossible, catalogue vide conserve: {e}")
            return ()

    async def close(self) -> None:
        """Ferme le client sous-jacent. Le catalogue en cache reste lisible."""
        await self._client.close()
