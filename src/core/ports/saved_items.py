"""
Interface port pour le stockage de la liste "My List".

Le pipeline ne possède pas ce stockage : il lit et remplace la liste
complète des identifiants sauvegardés (dernier écrivain gagnant).
"""

from abc import ABC, abstractmethod


class ISavedItemsStore(ABC):
    """
    Stockage clé-valeur de la liste des identifiants TMDB sauvegardés.

    Le format persisté est un tableau JSON d'entiers, dans l'ordre d'ajout.
    """

    @abstractmethod
    def get(self) -> list[int]:
        """Retourne les identifiants sauvegardés (liste vide si absente)."""
        ...

    @abstractmethod
    def set(self, item_ids: list[int]) -> None:
        """Remplace la liste complète des identifiants sauvegardés."""
        ...
