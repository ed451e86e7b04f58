"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- best-rated, most-films, average-rating, release-gap : affichage des resultats
- report : tableau de synthese d'un realisateur
- films : liste du catalogue, filtree ou non
- info, version
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from filmstats.config import Settings
from filmstats.core.entities.film import FilmCatalog
from filmstats.core.ports.api_clients import CatalogFetchError
from filmstats.main import _console_log_level, app
from filmstats.services.catalog import CatalogService
from filmstats.services.film_stats import FilmStatsService

runner = CliRunner()

NOLAN = "Christopher Nolan"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def main_container(test_settings: Settings):
    """Remplace le container de main.py et neutralise la configuration du logging."""
    with patch("filmstats.main.container") as container, patch(
        "filmstats.main.configure_logging"
    ) as configure:
        container.config.return_value = test_settings
        container.configure_logging = configure
        yield container


@pytest.fixture
def mock_container(mock_client: AsyncMock):
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie. Les services reels
    tournent sur un client simule.
    """
    catalog_service = CatalogService(client=mock_client)
    with patch("filmstats.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.films_client.return_value = mock_client
        container_instance.catalog_service.return_value = catalog_service
        container_instance.film_stats_service.return_value = FilmStatsService(
            catalog_service=catalog_service
        )
        yield container_instance


# ============================================================================
# Statistiques
# ============================================================================


class TestStatCommands:
    """Tests des commandes de statistiques."""

    def test_best_rated(self, mock_container: MagicMock, mock_client: AsyncMock):
        result = runner.invoke(app, ["best-rated", NOLAN])

        assert result.exit_code == 0
        assert "Interstellar" in result.output
        mock_client.close.assert_awaited_once()

    def test_best_rated_unknown_director(self, mock_container: MagicMock):
        result = runner.invoke(app, ["best-rated", "Inconnu"])

        assert result.exit_code == 0
        assert "Aucun film pour Inconnu" in result.output

    def test_most_films(self, mock_container: MagicMock):
        result = runner.invoke(app, ["most-films"])

        assert result.exit_code == 0
        assert NOLAN in result.output

    def test_most_films_empty_catalog(
        self, mock_container: MagicMock, mock_client: AsyncMock
    ):
        mock_client.fetch_catalog.return_value = ()

        result = runner.invoke(app, ["most-films"])

        assert result.exit_code == 0
        assert "Catalogue vide" in result.output

    def test_average_rating(self, mock_container: MagicMock):
        result = runner.invoke(app, ["average-rating", NOLAN])

        assert result.exit_code == 0
        assert "8.4" in result.output

    def test_release_gap(self, mock_container: MagicMock):
        result = runner.invoke(app, ["release-gap", NOLAN])

        assert result.exit_code == 0
        assert "147 jours" in result.output


class TestFetchFailureLogging:
    """L'echec de recuperation reste visible dans les logs."""

    @pytest.fixture
    def captured_logs(self):
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
        yield messages
        logger.remove(handler_id)

    def test_failed_fetch_warning_is_logged(
        self,
        mock_container: MagicMock,
        mock_client: AsyncMock,
        captured_logs: list[str],
    ):
        mock_client.fetch_catalog.side_effect = CatalogFetchError("401 Unauthorized")

        result = runner.invoke(app, ["best-rated", NOLAN])

        assert result.exit_code == 0
        assert "Aucun film pour" in result.output
        assert any(
            message.startswith("WARNING") and "401 Unauthorized" in message
            for message in captured_logs
        )


class TestReportCommand:
    """Tests de la commande report."""

    def test_report_shows_all_stats(self, mock_container: MagicMock):
        result = runner.invoke(app, ["report", NOLAN])

        assert result.exit_code == 0
        assert "Interstellar" in result.output
        assert "8.4" in result.output
        assert "147 jours" in result.output

    def test_report_unknown_director(self, mock_container: MagicMock):
        result = runner.invoke(app, ["report", "Inconnu"])

        assert result.exit_code == 0
        assert "Aucun film pour Inconnu" in result.output


class TestFilmsCommand:
    """Tests de la commande films."""

    def test_lists_whole_catalog(self, mock_container: MagicMock, catalog: FilmCatalog):
        result = runner.invoke(app, ["films"])

        assert result.exit_code == 0
        assert f"{len(catalog)} films" in result.output
        assert "Alien" in result.output

    def test_filters_by_director(self, mock_container: MagicMock):
        result = runner.invoke(app, ["films", "--director", "Steven Spielberg"])

        assert result.exit_code == 0
        assert "Jaws" in result.output
        assert "Alien" not in result.output

    def test_no_match(self, mock_container: MagicMock):
        result = runner.invoke(app, ["films", "-d", "Inconnu"])

        assert result.exit_code == 0
        assert "Aucun film" in result.output


# ============================================================================
# info / version / options globales
# ============================================================================


class TestInfoAndVersion:
    """Tests des commandes info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "FilmStats v0.1.0" in result.output

    def test_info_shows_configuration(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "https://films.example.test/films" in result.output
        assert "configuré" in result.output


class TestConsoleLogLevel:
    """Tests pour _console_log_level()."""

    def test_default_uses_settings(self, test_settings: Settings):
        assert _console_log_level(test_settings, verbose=0, quiet=False) == "INFO"

    def test_verbose_forces_debug(self, test_settings: Settings):
        assert _console_log_level(test_settings, verbose=1, quiet=False) == "DEBUG"

    def test_quiet_wins_over_verbose(self, test_settings: Settings):
        assert _console_log_level(test_settings, verbose=2, quiet=True) == "ERROR"

    def test_callback_configures_logging(self, main_container: MagicMock):
        runner.invoke(app, ["-q", "version"])

        main_container.configure_logging.assert_called_once()
        assert main_container.configure_logging.call_args.kwargs["log_level"] == "ERROR"
