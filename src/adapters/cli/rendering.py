"""
Affichage Rich des modeles du pipeline (accueil, detail, saisons, sous-titres).
"""

from typing import Sequence

from rich.panel import Panel
from rich.table import Table

from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.cli.helpers import console
from src.core.entities.catalog import (
    CatalogItem,
    Category,
    DetailBundle,
    HomeModel,
    MovieDetails,
    SeasonDetails,
)
from src.core.entities.subtitles import SubtitleResult

_KIND_LABELS = {"movie": "Film", "tv": "Serie"}


def _items_table(title: str, items: Sequence[CatalogItem], limit: int = 10) -> Table:
    table = Table(title=title, title_justify="left", show_lines=False)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Note", justify="right")

    for item in items[:limit]:
        table.add_row(
            str(item.id),
            item.title or "[dim]sans titre[/dim]",
            _KIND_LABELS.get(item.kind.value, item.kind.value),
            f"{item.rating:.1f}",
        )
    if len(items) > limit:
        table.caption = f"... {len(items) - limit} autre(s)"
    return table


def render_categories(categories: Sequence[Category]) -> None:
    """Affiche chaque categorie (emplacements en chargement signales)."""
    for category in categories:
        if category.loading:
            console.print(f"[bold]{category.title}[/bold] [yellow](chargement differe)[/yellow]")
            continue
        console.print(_items_table(category.title, category.items))


def render_home(home: HomeModel) -> None:
    """Affiche le hero puis les categories."""
    if home.hero is not None:
        hero = home.hero
        console.print(
            Panel(
                f"[bold]{hero.title}[/bold]  ({_KIND_LABELS.get(hero.kind.value)}, "
                f"note {hero.rating:.1f})\n"
                f"[dim]{TMDBClient.image_url(hero.backdrop_path) or 'sans image'}[/dim]",
                title="A la une",
                border_style="green",
            )
        )
    else:
        console.print("[yellow]Aucun element a la une.[/yellow]")
    render_categories(home.categories)


def render_items(title: str, items: Sequence[CatalogItem]) -> None:
    console.print(_items_table(title, items, limit=len(items)))


def render_details(bundle: DetailBundle) -> None:
    """Affiche une fiche et ses facettes."""
    details = bundle.details
    lines = [f"[bold]{details.item.title}[/bold] ({details.item.id})"]
    if isinstance(details, MovieDetails):
        if details.release_date:
            lines.append(f"Sortie : {details.release_date}")
        if details.runtime:
            lines.append(f"Duree : {details.runtime} min")
    else:
        lines.append(
            f"Saisons : {details.number_of_seasons} - Episodes : {details.number_of_episodes}"
        )
    if details.genres:
        lines.append("Genres : " + ", ".join(genre.name for genre in details.genres))
    directors = bundle.credits.directors
    if directors:
        lines.append("Realisation : " + ", ".join(directors))
    if bundle.credits.cast:
        lines.append("Avec : " + ", ".join(member.name for member in bundle.credits.cast[:5]))
    trailers = [video for video in bundle.videos if video.is_youtube_trailer]
    if trailers:
        lines.append(f"Bande-annonce : https://www.youtube.com/watch?v={trailers[0].key}")
    if details.overview:
        lines.append("")
        lines.append(details.overview)

    console.print(Panel("\n".join(lines), title="Detail", border_style="cyan"))
    if bundle.similar:
        console.print(_items_table("Similaires", bundle.similar, limit=5))
    if bundle.recommendations:
        console.print(_items_table("Recommandations", bundle.recommendations, limit=5))


def render_season(season: SeasonDetails) -> None:
    table = Table(title=season.name or f"Saison {season.season_number}", title_justify="left")
    table.add_column("Ep.", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Diffusion", style="dim")
    for episode in season.episodes:
        table.add_row(str(episode.episode_number), episode.name, episode.air_date or "")
    console.print(table)


def render_subtitle_result(result: SubtitleResult) -> None:
    if not result.success:
        console.print(f"[red]✗[/red] {result.error}")
        return
    console.print(
        f"[green]✓[/green] {result.release_name} "
        f"[dim]({result.current_index + 1}/{result.total_available})[/dim]"
    )
