"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    details,
    home,
    lazy,
    search,
    season,
)
from src.adapters.cli.commands.mylist_commands import mylist_app
from src.adapters.cli.commands.subtitle_commands import subtitles

__all__ = [
    # catalogue
    "home",
    "lazy",
    "search",
    "details",
    "season",
    # sous-titres
    "subtitles",
    # my list
    "mylist_app",
]
