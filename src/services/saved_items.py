"""
Service "My List" : resolution et gestion des elements sauvegardes.

La liste ne contient que des identifiants TMDB, sans le type : chaque
identifiant est d'abord resolu comme film, puis comme serie. Un identifiant
introuvable sous les deux types disparait silencieusement du resultat.
"""

from loguru import logger

from src.core.entities.catalog import CatalogItem
from src.core.errors import NotFoundFallback
from src.core.ports.api_clients import ICatalogProvider
from src.core.ports.saved_items import ISavedItemsStore
from src.core.value_objects.outcome import Failure, Outcome, Success, attempt, or_else
from src.services.batch import gather_settled


class SavedItemsResolver:
    """
    Resout des identifiants sauvegardes en entrees completes du catalogue.

    Tous les identifiants sont resolus en parallele (lot au mieux) : l'echec
    d'un identifiant n'affecte pas les autres.
    """

    def __init__(self, catalog: ICatalogProvider) -> None:
        """
        Args:
            catalog: Fournisseur catalogue (TMDB)
        """
        self._catalog = catalog

    async def _as_movie(self, item_id: int) -> Outcome[CatalogItem]:
        outcome = await attempt(self._catalog.get_movie(item_id))
        if outcome.ok:
            return Success(outcome.value.item)
        return Failure(NotFoundFallback(item_id, outcome.error))

    async def _as_series(self, item_id: int) -> Outcome[CatalogItem]:
        outcome = await attempt(self._catalog.get_series(item_id))
        if outcome.ok:
            return Success(outcome.value.item)
        return outcome

    async def resolve_one(self, item_id: int) -> CatalogItem:
        """
        Resout un identifiant : film d'abord, serie ensuite.

        Raises:
            ProviderError: Si l'identifiant n'est resolu sous aucun des deux types
        """
        outcome = await or_else(
            lambda: self._as_movie(item_id),
            lambda: self._as_series(item_id),
        )
        if not outcome.ok:
            logger.debug(f"Element sauvegarde {item_id} introuvable, ignore")
        return outcome.unwrap()

    async def resolve(self, item_ids: list[int]) -> list[CatalogItem]:
        """
        Resout tous les identifiants en parallele.

        Args:
            item_ids: Identifiants sauvegardes

        Returns:
            Elements resolus uniquement, dans l'ordre sauvegarde
        """
        if not item_ids:
            return []
        return await gather_settled(*(self.resolve_one(item_id) for item_id in item_ids))


class SavedItemsService:
    """
    Gestion de la liste "My List" (ajout, retrait, bascule).

    Lecture-modification-ecriture sur le stockage externe, sans transaction :
    en cas d'ecritures concurrentes, la derniere l'emporte.
    """

    def __init__(self, store: ISavedItemsStore, resolver: SavedItemsResolver) -> None:
        self._store = store
        self._resolver = resolver

    def list_ids(self) -> list[int]:
        """Identifiants sauvegardes, dans l'ordre d'ajout."""
        return self._store.get()

    def contains(self, item_id: int) -> bool:
        return item_id in self._store.get()

    def add(self, item_id: int) -> bool:
        """
        Ajoute un identifiant en fin de liste.

        Returns:
            True si ajoute, False s'il etait deja present
        """
        item_ids = self._store.get()
        if item_id in item_ids:
            return False
        item_ids.append(item_id)
        self._store.set(item_ids)
        return True

    def remove(self, item_id: int) -> bool:
        """
        Retire un identifiant.

        Returns:
            True si retire, False s'il etait absent
        """
        item_ids = self._store.get()
        if item_id not in item_ids:
            return False
        self._store.set([saved for saved in item_ids if saved != item_id])
        return True

    def toggle(self, item_id: int) -> bool:
        """
        Bascule la presence d'un identifiant.

        Returns:
            True si l'element est dans la liste apres l'appel
        """
        if self.remove(item_id):
            return False
        self.add(item_id)
        return True

    async def resolve_saved(self) -> list[CatalogItem]:
        """Resout la liste sauvegardee courante en elements du catalogue."""
        return await self._resolver.resolve(self._store.get())
