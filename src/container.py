"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des clients fournisseurs (TMDB, OpenSubtitles),
du stockage "My List" et des services du pipeline pour la CLI.
Chaque client est construit explicitement avec sa configuration ; aucun
client global au niveau module.
"""

from dependency_injector import containers, providers

from .adapters.api.opensubtitles_client import OpenSubtitlesClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.storage.saved_items_store import DiskSavedItemsStore
from .config import Settings
from .services.content_aggregator import ContentAggregator
from .services.detail_aggregator import DetailAggregator
from .services.saved_items import SavedItemsResolver, SavedItemsService
from .services.subtitle_service import SubtitleService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        aggregator = container.content_aggregator()
        home = await aggregator.fetch_content(MediaTab.ALL)
        await container.tmdb_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Stockage "My List" - Singleton (un seul handle diskcache)
    saved_items_store = providers.Singleton(
        DiskSavedItemsStore,
        store_dir=config.provided.saved_items_dir,
    )

    # Clients fournisseurs - Singleton pour partager la connexion httpx
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
    )

    subtitles_client = providers.Singleton(
        OpenSubtitlesClient,
        user_agent=config.provided.subtitles_user_agent,
    )

    # Services
    saved_items_resolver = providers.Factory(
        SavedItemsResolver,
        catalog=tmdb_client,
    )

    saved_items_service = providers.Factory(
        SavedItemsService,
        store=saved_items_store,
        resolver=saved_items_resolver,
    )

    content_aggregator = providers.Factory(
        ContentAggregator,
        catalog=tmdb_client,
        saved_items=saved_items_service,
    )

    detail_aggregator = providers.Factory(
        DetailAggregator,
        catalog=tmdb_client,
    )

    subtitle_service = providers.Factory(
        SubtitleService,
        subtitles=subtitles_client,
        details=detail_aggregator,
    )
