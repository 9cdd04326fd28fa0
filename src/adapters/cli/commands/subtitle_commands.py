"""
Commande CLI de recuperation des sous-titres.
"""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import console, parse_kind, with_container
from src.adapters.cli.rendering import render_subtitle_result
from src.core.entities.catalog import CatalogKind
from src.core.entities.subtitles import SortStrategy, SubtitleSearchParams


def subtitles(
    item_id: Annotated[int, typer.Argument(help="ID TMDB")],
    kind: Annotated[
        str, typer.Option("--kind", "-k", help="Type : movie ou tv")
    ] = "movie",
    language: Annotated[
        Optional[str],
        typer.Option("--lang", "-l", help="Langue OpenSubtitles (defaut: configuration)"),
    ] = None,
    season: Annotated[
        Optional[int], typer.Option("--season", "-s", help="Numero de saison")
    ] = None,
    episode: Annotated[
        Optional[int], typer.Option("--episode", "-e", help="Numero d'episode")
    ] = None,
    index: Annotated[
        int, typer.Option("--index", "-i", help="Rang du candidat dans la liste triee")
    ] = 0,
    sort: Annotated[
        Optional[SortStrategy],
        typer.Option("--sort", help="Tri des candidats (defaut: configuration)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier .srt de sortie"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Affiche le resultat brut en JSON")
    ] = False,
) -> None:
    """Recherche, classe et telecharge un sous-titre."""
    asyncio.run(
        _subtitles_async(
            item_id, parse_kind(kind), language, season, episode, index, sort, output, as_json
        )
    )


@with_container()
async def _subtitles_async(
    container,
    item_id: int,
    kind: CatalogKind,
    language: Optional[str],
    season: Optional[int],
    episode: Optional[int],
    index: int,
    sort: Optional[SortStrategy],
    output: Optional[Path],
    as_json: bool,
) -> None:
    """Implementation async de la commande subtitles."""
    config = container.config()
    params = SubtitleSearchParams(
        tmdb_id=item_id,
        language=language or config.subtitle_language,
        kind=kind,
        season=season,
        episode=episode,
        sort=sort or config.subtitle_sort,
    )

    with console.status("[cyan]Recherche des sous-titres..."):
        result = await container.subtitle_service().get_subtitles(params, index=index)

    if as_json:
        console.print_json(json.dumps(result.as_payload()))
    else:
        render_subtitle_result(result)

    if not result.success:
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(result.srt_content or "", encoding="utf-8")
        console.print(f"[dim]Ecrit dans {output}[/dim]")
