"""
Fixtures pytest partagees pour les tests FilmStats.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue de films type
- Mock du port IFilmCatalogClient
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from filmstats.config import Settings
from filmstats.core.entities.film import Film, FilmCatalog
from filmstats.core.ports.api_clients import IFilmCatalogClient


@pytest.fixture
def nolan_films() -> FilmCatalog:
    """Les trois films de Christopher Nolan de l'exemple de reference."""
    return (
        Film("Batman Begins", 140, 8.2, "2006-06-16", "Christopher Nolan"),
        Film("Interstellar", 169, 8.6, "2014-11-07", "Christopher Nolan"),
        Film("Prestige", 130, 8.5, "2006-11-10", "Christopher Nolan"),
    )


@pytest.fixture
def catalog(nolan_films: FilmCatalog) -> FilmCatalog:
    """Catalogue avec plusieurs realisateurs."""
    return nolan_films + (
        Film("Jaws", 124, 8.1, "1975-06-20", "Steven Spielberg"),
        Film("E.T.", 115, 7.9, "1982-06-11", "Steven Spielberg"),
        Film("Alien", 117, 8.5, "1979-05-25", "Ridley Scott"),
    )


@pytest.fixture
def mock_client(catalog: FilmCatalog) -> AsyncMock:
    """
    Mock de IFilmCatalogClient.

    fetch_catalog retourne le catalogue type par defaut.
    """
    client = AsyncMock(spec=IFilmCatalogClient)
    client.fetch_catalog.return_value = catalog
    return client


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles de l'environnement."""
    return Settings(
        films_endpoint_url="https://films.example.test/films",
        api_token="test-token",
        log_file=tmp_path / "test.log",
    )
