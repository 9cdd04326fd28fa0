"""
Filtrage et classement des entrees du catalogue.

- filter_valid : ne garde que les entrees affichables, tronquees a la page
- select_hero : choisit l'element mis en avant en tete d'onglet

Le choix du hero suit trois niveaux de repli, dans cet ordre :
1. premier element avec backdrop + poster + note > 6 + type reconnu
2. premier element avec backdrop + poster, quelle que soit la note
3. premier element de la liste, sans condition
"""

from typing import Optional, Sequence

from src.core.entities.catalog import CatalogItem
from src.utils.constants import HERO_MIN_RATING, ITEMS_PER_CATEGORY


def filter_valid(
    items: Sequence[CatalogItem],
    page_size: int = ITEMS_PER_CATEGORY,
) -> list[CatalogItem]:
    """
    Filtre les entrees non affichables et tronque a la taille de page.

    Une entree est ecartee si elle n'a pas a la fois un poster et un
    backdrop, ou si elle n'est ni d'un type reconnu ni titree.

    Args:
        items: Entrees brutes d'un flux, dans l'ordre du fournisseur
        page_size: Nombre maximum d'entrees conservees

    Returns:
        Au plus page_size entrees, ordre preserve
    """
    valid = [item for item in items if item.has_images and item.recognized]
    return valid[:page_size]


def select_hero(items: Sequence[CatalogItem]) -> Optional[CatalogItem]:
    """
    Selectionne l'element hero d'une liste.

    Args:
        items: Entrees brutes du flux hero (non filtrees)

    Returns:
        L'element choisi, ou None si la liste est vide
    """
    for item in items:
        if item.has_images and item.rating > HERO_MIN_RATING and item.recognized:
            return item

    for item in items:
        if item.has_images:
            return item

    return items[0] if items else None
