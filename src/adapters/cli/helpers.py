"""
Utilitaires partages pour les commandes CLI de LimeTV.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant les clients
- parse_kind / parse_tab : conversion des options texte en enums
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container
from src.core.entities.catalog import CatalogKind, MediaTab

console = Console()

_KIND_ALIASES = {
    "movie": CatalogKind.MOVIE,
    "film": CatalogKind.MOVIE,
    "tv": CatalogKind.SERIES,
    "series": CatalogKind.SERIES,
}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_tmdb: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les clients HTTP et le stockage sont fermes a la sortie de la commande.

    Args:
        requires_tmdb: Si True (defaut), refuse de lancer la commande sans cle TMDB.

    Usage:
        @with_container()
        async def my_command(container, ...):
            aggregator = container.content_aggregator()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_tmdb and not container.config().tmdb_enabled:
                console.print(
                    "[red]Cle TMDB absente.[/red] "
                    "Definir LIMETV_TMDB_API_KEY (variable d'environnement ou .env)."
                )
                raise typer.Exit(code=1)
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tmdb_client().close()
                await container.subtitles_client().close()
                container.saved_items_store().close()
        return wrapper
    return decorator


def parse_kind(value: str) -> CatalogKind:
    """Convertit "movie" / "tv" / "series" en CatalogKind."""
    try:
        return _KIND_ALIASES[value.lower()]
    except KeyError:
        raise typer.BadParameter(f"Type inconnu: {value} (movie, tv)") from None


def parse_tab(value: str) -> MediaTab:
    """Convertit "all" / "movie" / "tv" en MediaTab."""
    try:
        return MediaTab(value.lower())
    except ValueError:
        raise typer.BadParameter(f"Onglet inconnu: {value} (all, movie, tv)") from None
