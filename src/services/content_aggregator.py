"""
Service d'agregation de l'ecran d'accueil.

Construit le modele d'accueil d'un onglet (hero + categories) en un seul lot
tout-ou-rien, puis charge a la demande les categories differees.

Ordre des categories :
1. premiere categorie prioritaire (tendances)
2. "My List", uniquement sur l'onglet "all" et si au moins un element est resolu
3. autres categories prioritaires, dans l'ordre configure
4. un emplacement en chargement par categorie differee
"""

from typing import Optional, Sequence

from loguru import logger

from src.core.entities.catalog import (
    CatalogItem,
    CatalogKind,
    Category,
    FeedConfig,
    HomeModel,
    MediaTab,
)
from src.core.errors import AggregationFailure, ProviderError
from src.core.ports.api_clients import ICatalogProvider
from src.services.batch import gather_all
from src.services.catalog_filter import filter_valid, select_hero
from src.services.saved_items import SavedItemsService
from src.utils.constants import FEEDS, ITEMS_PER_CATEGORY, MY_LIST_TITLE

SEARCHABLE_KINDS = frozenset(kind.value for kind in CatalogKind)


def assemble_categories(
    tab: MediaTab,
    priority: Sequence[Category],
    saved_items: Sequence[CatalogItem],
    lazy_titles: Sequence[str],
) -> list[Category]:
    """
    Assemble les categories de l'accueil dans l'ordre d'affichage.

    Args:
        tab: Onglet demande
        priority: Categories prioritaires resolues, dans l'ordre configure
        saved_items: Elements "My List" resolus
        lazy_titles: Titres des categories differees

    Returns:
        Categories ordonnees, emplacements differes en fin de liste
    """
    categories: list[Category] = []
    if priority:
        categories.append(priority[0])

    if saved_items and tab is MediaTab.ALL:
        categories.append(Category.resolved(MY_LIST_TITLE, list(saved_items)))

    categories.extend(priority[1:])
    categories.extend(Category.placeholder(title) for title in lazy_titles)
    return categories


def splice_lazy_categories(
    categories: Sequence[Category],
    lazy: Sequence[Category],
) -> list[Category]:
    """
    Remplace les emplacements en chargement par les categories resolues.

    La correspondance se fait par titre ; un emplacement sans categorie
    resolue reste en chargement.
    """
    resolved = {category.title: category for category in lazy}
    return [
        resolved.get(category.title, category) if category.loading else category
        for category in categories
    ]


class ContentAggregator:
    """
    Agrege les flux TMDB et la liste sauvegardee en modele d'accueil.

    Example:
        aggregator = ContentAggregator(catalog=tmdb_client, saved_items=saved_service)
        home = await aggregator.fetch_content(MediaTab.ALL)
        lazy = await aggregator.fetch_lazy_categories(MediaTab.ALL)
        categories = splice_lazy_categories(home.categories, lazy)
    """

    def __init__(
        self,
        catalog: ICatalogProvider,
        saved_items: SavedItemsService,
        feeds: Optional[dict[MediaTab, FeedConfig]] = None,
        page_size: int = ITEMS_PER_CATEGORY,
    ) -> None:
        """
        Args:
            catalog: Fournisseur catalogue (TMDB)
            saved_items: Service "My List"
            feeds: Configuration des flux par onglet (FEEDS par defaut)
            page_size: Taille maximale d'une categorie
        """
        self._catalog = catalog
        self._saved_items = saved_items
        self._feeds = feeds if feeds is not None else FEEDS
        self._page_size = page_size

    def _config(self, tab: MediaTab) -> FeedConfig:
        return self._feeds[tab]

    async def fetch_content(self, tab: MediaTab) -> HomeModel:
        """
        Construit le modele d'accueil d'un onglet.

        Le flux hero, la resolution "My List" et tous les flux prioritaires
        partent ensemble et sont attendus ensemble.

        Raises:
            AggregationFailure: Si une seule requete du lot echoue
        """
        config = self._config(tab)

        hero_items, saved_items, *priority_items = await gather_all(
            self._catalog.get_feed(config.hero),
            self._saved_items.resolve_saved(),
            *(self._catalog.get_feed(endpoint) for endpoint in config.priority),
            operation=f"home:{tab.value}",
        )

        priority = [
            Category.resolved(endpoint.title, filter_valid(items, self._page_size))
            for endpoint, items in zip(config.priority, priority_items)
        ]
        categories = assemble_categories(
            tab,
            priority,
            saved_items,
            [endpoint.title for endpoint in config.lazy],
        )

        logger.info(
            f"Accueil {tab.value}: {len(categories)} categories, "
            f"{len(saved_items)} element(s) sauvegarde(s)"
        )
        return HomeModel(hero=select_hero(hero_items), categories=tuple(categories))

    async def fetch_lazy_categories(self, tab: MediaTab) -> list[Category]:
        """
        Charge les categories differees d'un onglet.

        En cas d'echec du lot, retourne une liste vide : les emplacements
        de l'accueil restent en chargement.

        Returns:
            Categories resolues dans l'ordre configure, ou [] en cas d'echec
        """
        config = self._config(tab)
        if not config.lazy:
            return []

        try:
            lazy_items = await gather_all(
                *(self._catalog.get_feed(endpoint) for endpoint in config.lazy),
                operation=f"lazy:{tab.value}",
            )
        except AggregationFailure as e:
            logger.warning(f"Categories differees indisponibles ({tab.value}): {e}")
            return []

        return [
            Category.resolved(endpoint.title, filter_valid(items, self._page_size))
            for endpoint, items in zip(config.lazy, lazy_items)
        ]

    async def search(self, query: str) -> list[CatalogItem]:
        """
        Recherche des films et series par texte libre.

        Les personnes sont exclues. Une requete vide ou un echec fournisseur
        donne une liste vide.
        """
        if not query.strip():
            return []

        try:
            results = await self._catalog.search_multi(query.strip())
        except ProviderError as e:
            logger.bind(status_code=e.status_code, body=e.body).warning(
                f"Recherche '{query}' en echec: {e}"
            )
            return []

        return [item for item in results if item.raw.get("media_type") in SEARCHABLE_KINDS]
