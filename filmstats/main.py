"""
Point d'entrée CLI de FilmStats.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    average_rating,
    best_rated,
    films,
    most_films,
    release_gap,
    report,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="filmstats",
    help="Statistiques sur le catalogue du service Films",
)
container = Container()


def _console_log_level(settings: Settings, verbose: int, quiet: bool) -> str:
    """Niveau console selon les options : -q force ERROR, -v force DEBUG."""
    if quiet:
        return "ERROR"
    if verbose > 0:
        return "DEBUG"
    return settings.log_level


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """FilmStats - Statistiques par realisateur."""
    settings = container.config()
    configure_logging(
        log_level=_console_log_level(settings, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command(name="best-rated")(best_rated)
app.command(name="most-films")(most_films)
app.command(name="average-rating")(average_rating)
app.command(name="release-gap")(release_gap)
app.command()(report)
app.command()(films)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    logger.info("Configuration FilmStats")
    typer.echo(f"Endpoint : {config.films_endpoint_url}")
    typer.echo(f"Jeton API : {'configuré' if config.api_enabled else 'absent'}")
    typer.echo(f"Timeout : {config.request_timeout} s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"FilmStats v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
