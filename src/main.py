"""
Point d'entrée CLI de LimeTV.

Configure le logging et fournit les commandes du pipeline (accueil, fiches,
recherche, sous-titres, My List).
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    details,
    home,
    lazy,
    mylist_app,
    search,
    season,
    subtitles,
)
from .config import Settings
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="limetv",
    help="Agregation de contenu TMDB et resolution de sous-titres",
)


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
    """LimeTV - Catalogue, fiches et sous-titres."""
    settings = Settings()
    configure_logging(
        log_level=level_for_verbosity(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Catalogue
app.command()(home)
app.command()(lazy)
app.command()(search)
app.command()(details)
app.command()(season)

# Sous-titres
app.command()(subtitles)

# Monter mylist_app comme sous-commande
app.add_typer(mylist_app, name="mylist")


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    logger.info("Configuration LimeTV")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Sous-titres : langue {config.subtitle_language}, tri {config.subtitle_sort.value}")
    typer.echo(f"My List : {config.saved_items_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("LimeTV v0.1.0")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
