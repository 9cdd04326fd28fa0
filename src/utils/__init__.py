"""
Utilitaires et constantes pour LimeTV.

Ce module contient les constantes partagees (flux TMDB, cles de stockage,
signaux de classement des sous-titres).
"""

from src.utils.constants import (
    FEEDS,
    ITEMS_PER_CATEGORY,
    MY_LIST_KEY,
    MY_LIST_TITLE,
)

__all__ = [
    "FEEDS",
    "ITEMS_PER_CATEGORY",
    "MY_LIST_KEY",
    "MY_LIST_TITLE",
]
