"""
Stockage persistant de la liste "My List" sur disque.

Utilise diskcache comme stockage clé-valeur : la liste est conservée sous la
clé MY_LIST_KEY sous forme de tableau JSON d'entiers, ce qui permet de la
relire entre deux exécutions. Chaque écriture horodate aussi la clé
MY_LIST_UPDATED_KEY pour que les écrans puissent détecter un changement.
"""

import json
import time
from pathlib import Path
from typing import Optional, Union

from diskcache import Cache
from loguru import logger

from src.core.ports.saved_items import ISavedItemsStore
from src.utils.constants import MY_LIST_KEY, MY_LIST_UPDATED_KEY


class DiskSavedItemsStore(ISavedItemsStore):
    """
    Implémentation diskcache de ISavedItemsStore.

    Example:
        store = DiskSavedItemsStore(store_dir="~/.local/share/limetv/store")
        store.set([27205, 1396])
        store.get()  # [27205, 1396]
    """

    def __init__(self, store_dir: Union[str, Path]) -> None:
        """
        Initialise le stockage.

        Args:
            store_dir: Répertoire du stockage (créé si inexistant)
        """
        self._cache = Cache(str(store_dir))

    def get(self) -> list[int]:
        """
        Lit la liste sauvegardée.

        Une valeur illisible (JSON invalide, type inattendu) est traitée
        comme une liste vide.
        """
        raw = self._cache.get(MY_LIST_KEY)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Liste sauvegardee illisible, ignoree: {raw!r}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Liste sauvegardee inattendue, ignoree: {raw!r}")
            return []

        return [item for item in data if isinstance(item, int) and not isinstance(item, bool)]

    def set(self, item_ids: list[int]) -> None:
        """Remplace la liste sauvegardée et horodate la modification."""
        self._cache.set(MY_LIST_KEY, json.dumps(list(item_ids)))
        self._cache.set(MY_LIST_UPDATED_KEY, str(int(time.time() * 1000)))

    def last_updated(self) -> Optional[int]:
        """Horodatage (ms) de la dernière écriture, ou None."""
        raw = self._cache.get(MY_LIST_UPDATED_KEY)
        return int(raw) if raw is not None else None

    def close(self) -> None:
        """Ferme le stockage (a appeler a la fin)."""
        self._cache.close()
