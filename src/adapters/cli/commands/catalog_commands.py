"""
Commandes CLI du catalogue : accueil, categories differees, recherche, detail, saison.
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.helpers import console, parse_kind, parse_tab, suppress_loguru, with_container
from src.adapters.cli.rendering import (
    render_categories,
    render_details,
    render_home,
    render_items,
    render_season,
)
from src.core.errors import AggregationFailure, ProviderError

TabOption = Annotated[
    str,
    typer.Option("--tab", "-t", help="Onglet : all, movie ou tv"),
]
KindOption = Annotated[
    str,
    typer.Option("--kind", "-k", help="Type : movie ou tv"),
]


def home(tab: TabOption = "all") -> None:
    """Affiche l'accueil d'un onglet (hero, My List, categories)."""
    asyncio.run(_home_async(parse_tab(tab)))


@with_container()
async def _home_async(container, tab) -> None:
    """Implementation async de la commande home."""
    aggregator = container.content_aggregator()

    try:
        with console.status("[cyan]Chargement de l'accueil..."):
            home_model = await aggregator.fetch_content(tab)
    except AggregationFailure as e:
        console.print(f"[red]Accueil indisponible :[/red] {e}")
        raise typer.Exit(code=1)

    with suppress_loguru():
        render_home(home_model)


def lazy(tab: TabOption = "all") -> None:
    """Charge et affiche les categories differees d'un onglet."""
    asyncio.run(_lazy_async(parse_tab(tab)))


@with_container()
async def _lazy_async(container, tab) -> None:
    """Implementation async de la commande lazy."""
    aggregator = container.content_aggregator()

    with console.status("[cyan]Chargement des categories..."):
        categories = await aggregator.fetch_lazy_categories(tab)

    if not categories:
        console.print("[yellow]Aucune categorie differee disponible.[/yellow]")
        return

    with suppress_loguru():
        render_categories(categories)


def search(
    query: Annotated[str, typer.Argument(help="Texte a rechercher")],
) -> None:
    """Recherche des films et series."""
    asyncio.run(_search_async(query))


@with_container()
async def _search_async(container, query: str) -> None:
    """Implementation async de la commande search."""
    results = await container.content_aggregator().search(query)
    if not results:
        console.print(f"[yellow]Aucun resultat pour '{query}'.[/yellow]")
        return
    render_items(f"Resultats pour '{query}'", results)


def details(
    item_id: Annotated[int, typer.Argument(help="ID TMDB")],
    kind: KindOption = "movie",
) -> None:
    """Affiche la fiche d'un film ou d'une serie."""
    asyncio.run(_details_async(item_id, parse_kind(kind)))


@with_container()
async def _details_async(container, item_id: int, kind) -> None:
    """Implementation async de la commande details."""
    try:
        bundle = await container.detail_aggregator().fetch_details(item_id, kind)
    except AggregationFailure as e:
        console.print(f"[red]Fiche indisponible :[/red] {e}")
        raise typer.Exit(code=1)

    with suppress_loguru():
        render_details(bundle)


def season(
    series_id: Annotated[int, typer.Argument(help="ID TMDB de la serie")],
    season_number: Annotated[int, typer.Argument(help="Numero de saison")],
) -> None:
    """Affiche les episodes d'une saison."""
    asyncio.run(_season_async(series_id, season_number))


@with_container()
async def _season_async(container, series_id: int, season_number: int) -> None:
    """Implementation async de la commande season."""
    try:
        season_details = await container.detail_aggregator().fetch_season_details(
            series_id, season_number
        )
    except ProviderError as e:
        console.print(f"[red]Saison indisponible :[/red] {e}")
        raise typer.Exit(code=1)

    render_season(season_details)
