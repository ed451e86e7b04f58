"""
Commandes CLI de statistiques sur le catalogue de films.

Chaque commande declenche la recuperation unique du catalogue puis
affiche le resultat avec Rich. Une recuperation en echec donne un
catalogue vide : les commandes affichent alors les valeurs par defaut.
Les logs restent actifs pendant la recuperation (avertissement en cas
d'echec) et ne sont coupes que pendant l'affichage Rich.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from filmstats.adapters.cli.helpers import console, suppress_loguru, with_container
from filmstats.core.entities.film import Film
from filmstats.services.film_stats import DirectorReport, films_by_director

DirectorArg = Annotated[str, typer.Argument(help="Nom exact du realisateur (sensible a la casse)")]


def best_rated(director: DirectorArg) -> None:
    """Affiche le film le mieux note d'un realisateur."""
    asyncio.run(_best_rated_async(director))


@with_container()
async def _best_rated_async(container, director: str) -> None:
    stats = container.film_stats_service()
    name = await stats.best_rated_film(director)
    with suppress_loguru():
        if not name:
            console.print(f"[yellow]Aucun film pour {director}.[/yellow]")
        else:
            console.print(f"[bold]{name}[/bold]")


def most_films() -> None:
    """Affiche le realisateur ayant le plus de films."""
    asyncio.run(_most_films_async())


@with_container()
async def _most_films_async(container) -> None:
    stats = container.film_stats_service()
    director = await stats.director_with_most_films()
    with suppress_loguru():
        if not director:
            console.print("[yellow]Catalogue vide.[/yellow]")
        else:
            console.print(f"[bold]{director}[/bold]")


def average_rating(director: DirectorArg) -> None:
    """Affiche la note moyenne d'un realisateur (1 decimale)."""
    asyncio.run(_average_rating_async(director))


@with_container()
async def _average_rating_async(container, director: str) -> None:
    stats = container.film_stats_service()
    rating = await stats.average_rating(director)
    with suppress_loguru():
        console.print(f"{rating:.1f}")


def release_gap(director: DirectorArg) -> None:
    """Affiche le plus petit ecart en jours entre deux sorties d'un realisateur."""
    asyncio.run(_release_gap_async(director))


@with_container()
async def _release_gap_async(container, director: str) -> None:
    stats = container.film_stats_service()
    gap = await stats.shortest_release_gap(director)
    with suppress_loguru():
        console.print(f"{gap} jours")


def report(director: DirectorArg) -> None:
    """Affiche toutes les statistiques d'un realisateur."""
    asyncio.run(_report_async(director))


@with_container()
async def _report_async(container, director: str) -> None:
    stats = container.film_stats_service()
    director_report = await stats.director_report(director)
    with suppress_loguru():
        if director_report.film_count == 0:
            console.print(f"[yellow]Aucun film pour {director}.[/yellow]")
        else:
            console.print(_render_report_table(director_report))


def _render_report_table(director_report: DirectorReport) -> Table:
    """Construit le tableau Rich de synthese d'un realisateur."""
    table = Table(title=director_report.director_name, show_header=False)
    table.add_column("Statistique", style="cyan")
    table.add_column("Valeur")
    table.add_row("Films", str(director_report.film_count))
    table.add_row("Mieux note", director_report.best_rated_film)
    table.add_row("Note moyenne", f"{director_report.average_rating:.1f}")
    table.add_row("Ecart minimal", f"{director_report.shortest_release_gap} jours")
    return table


def films(
    director: Annotated[
        Optional[str],
        typer.Option("--director", "-d", help="Filtrer sur un realisateur"),
    ] = None,
) -> None:
    """Liste les films du catalogue."""
    asyncio.run(_films_async(director))


@with_container()
async def _films_async(container, director: Optional[str]) -> None:
    catalog_service = container.catalog_service()
    catalog = await catalog_service.get_catalog()

    selected = list(catalog) if director is None else films_by_director(catalog, director)
    with suppress_loguru():
        if not selected:
            console.print("[yellow]Aucun film.[/yellow]")
        else:
            console.print(_render_films_table(selected))


def _render_films_table(selected: list[Film]) -> Table:
    """Construit le tableau Rich d'une liste de films."""
    table = Table(title=f"{len(selected)} films")
    table.add_column("Titre", style="bold")
    table.add_column("Realisateur", style="cyan")
    table.add_column("Sortie")
    table.add_column("Duree", justify="right")
    table.add_column("Note", justify="right")
    for film in selected:
        table.add_row(
            film.name,
            film.director_name,
            film.release_date,
            f"{film.length} min",
            f"{film.rating:.1f}",
        )
    return table
