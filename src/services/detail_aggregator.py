"""
Service d'agregation de l'ecran de detail.

Recupere la fiche d'un film ou d'une serie et ses quatre facettes (credits,
videos, similaires, recommandations) en un lot tout-ou-rien, les saisons a la
demande, et l'identifiant IMDb utilise pour les sous-titres.
"""

from typing import Optional

from loguru import logger

from src.core.entities.catalog import CatalogKind, DetailBundle, SeasonDetails
from src.core.errors import ProviderError
from src.core.ports.api_clients import ICatalogProvider
from src.services.batch import gather_all


class DetailAggregator:
    """
    Agrege les donnees de l'ecran de detail.

    Example:
        aggregator = DetailAggregator(catalog=tmdb_client)
        bundle = await aggregator.fetch_details(1396, CatalogKind.SERIES)
        season = await aggregator.fetch_season_details(1396, 1)
    """

    def __init__(self, catalog: ICatalogProvider) -> None:
        self._catalog = catalog

    async def fetch_details(self, item_id: int, kind: CatalogKind) -> DetailBundle:
        """
        Recupere la fiche et ses facettes en parallele.

        Args:
            item_id: ID TMDB
            kind: Film ou serie

        Returns:
            DetailBundle complet

        Raises:
            AggregationFailure: Si une des cinq requetes echoue
        """
        details, credits, videos, similar, recommendations = await gather_all(
            self._catalog.get_details(kind, item_id),
            self._catalog.get_credits(kind, item_id),
            self._catalog.get_videos(kind, item_id),
            self._catalog.get_similar(kind, item_id),
            self._catalog.get_recommendations(kind, item_id),
            operation=f"details:{kind.value}/{item_id}",
        )

        return DetailBundle(
            details=details,
            credits=credits,
            videos=tuple(videos),
            similar=tuple(similar),
            recommendations=tuple(recommendations),
        )

    async def fetch_season_details(self, series_id: int, season_number: int) -> SeasonDetails:
        """
        Recupere une saison d'une serie.

        Raises:
            ProviderError: Si la requete echoue
        """
        try:
            return await self._catalog.get_season(series_id, season_number)
        except ProviderError as e:
            logger.bind(status_code=e.status_code, body=e.body).error(
                f"Saison {season_number} de la serie {series_id} indisponible: {e}"
            )
            raise

    async def resolve_external_id(self, item_id: int, kind: CatalogKind) -> Optional[str]:
        """
        Recupere l'identifiant IMDb d'un film ou d'une serie.

        Ne leve jamais : un champ absent ou un echec de requete donne None.

        Returns:
            Identifiant IMDb (format ttXXXXXXX), ou None
        """
        try:
            external_ids = await self._catalog.get_external_ids(kind, item_id)
        except ProviderError as e:
            logger.bind(status_code=e.status_code, body=e.body).warning(
                f"IDs externes indisponibles pour {kind.value}/{item_id}: {e}"
            )
            return None

        return external_ids.get("imdb_id") or None
