"""
Container d'injection de dependances via dependency-injector.

Le CatalogService est un Singleton : c'est lui qui garantit que le catalogue
n'est recupere qu'une fois par processus.
"""

from dependency_injector import containers, providers

from .adapters.api.films_client import FilmsAPIClient
from .config import Settings
from .services.catalog import CatalogService
from .services.film_stats import FilmStatsService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        stats = container.film_stats_service()
        best = await stats.best_rated_film("Christopher Nolan")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    films_client = providers.Singleton(
        FilmsAPIClient,
        endpoint_url=config.provided.films_endpoint_url,
        api_token=config.provided.api_token,
        timeout=config.provided.request_timeout,
    )

    # Cache du catalogue - une seule instance par processus
    catalog_service = providers.Singleton(
        CatalogService,
        client=films_client,
    )

    # Stateless, partage le cache du catalog_service
    film_stats_service = providers.Factory(
        FilmStatsService,
        catalog_service=catalog_service,
    )
