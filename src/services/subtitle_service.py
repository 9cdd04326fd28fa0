"""
Service de resolution des sous-titres.

Enchaine : identifiant IMDb -> recherche OpenSubtitles -> tri -> choix du
candidat -> telechargement et decompression gzip. Le resultat est toujours
un SubtitleResult etiquete (succes ou echec), jamais une exception.
"""

import gzip
import zlib
from typing import Optional

from loguru import logger

from src.core.entities.subtitles import (
    SubtitleCandidate,
    SubtitleResult,
    SubtitleSearchParams,
)
from src.core.errors import DownloadError, ProviderError, SubtitleUnavailable
from src.core.ports.api_clients import ISubtitleProvider
from src.services.detail_aggregator import DetailAggregator
from src.services.subtitle_scoring import build_search_path, clamp_index, sort_candidates

NO_EXTERNAL_ID = "Could not find IMDB ID for this title"
NO_SUBTITLES = "No subtitles found for this title"
NO_DOWNLOAD_LINK = "No download link available"
EMPTY_PAYLOAD = "Failed to download subtitle: empty payload"
UNKNOWN_ERROR = "Unknown error occurred"

GZIP_MAGIC = b"\x1f\x8b"


def decode_subtitle_payload(payload: bytes) -> str:
    """
    Decompresse (gzip) et decode un fichier de sous-titres en texte UTF-8.

    Un corps sans en-tete gzip est considere comme deja decompresse
    (transport avec Content-Encoding: gzip).

    Raises:
        DownloadError: Si la decompression echoue ou si le texte obtenu est vide
    """
    if payload[:2] == GZIP_MAGIC:
        try:
            payload = gzip.decompress(payload)
        except (OSError, EOFError, zlib.error) as e:
            raise DownloadError(f"Failed to download subtitle: {e}") from e
    text = payload.decode("utf-8", errors="replace")
    if not text:
        raise DownloadError(EMPTY_PAYLOAD)
    return text


class SubtitleService:
    """
    Recherche, classe et recupere un sous-titre pour un film ou un episode.

    Example:
        service = SubtitleService(subtitles=os_client, details=detail_aggregator)
        result = await service.get_subtitles(
            SubtitleSearchParams(tmdb_id=1396, language="eng",
                                 kind=CatalogKind.SERIES, season=1, episode=1),
        )
        if result.success:
            print(result.release_name, result.total_available)
    """

    def __init__(self, subtitles: ISubtitleProvider, details: DetailAggregator) -> None:
        """
        Args:
            subtitles: Fournisseur de sous-titres (OpenSubtitles)
            details: Agregateur de detail, pour l'identifiant IMDb
        """
        self._subtitles = subtitles
        self._details = details

    async def search_subtitles(
        self,
        imdb_id: str,
        language: str,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> list[SubtitleCandidate]:
        """
        Recherche les candidats pour un identifiant IMDb.

        Un echec fournisseur donne une liste vide (log warning).

        Returns:
            Candidats dans l'ordre du fournisseur
        """
        path = build_search_path(imdb_id, language, season=season, episode=episode)
        try:
            return await self._subtitles.search(path)
        except ProviderError as e:
            logger.warning(f"Recherche de sous-titres en echec ({path}): {e}")
            return []

    async def download_subtitle(self, download_link: str) -> str:
        """
        Telecharge et decode un fichier de sous-titres.

        Raises:
            DownloadError: Echec de transport ou de decompression
        """
        try:
            payload = await self._subtitles.download(download_link)
        except ProviderError as e:
            raise DownloadError(f"Failed to download subtitle: {e}") from e
        return decode_subtitle_payload(payload)

    async def _resolve(self, params: SubtitleSearchParams, index: int) -> SubtitleResult:
        imdb_id = await self._details.resolve_external_id(params.tmdb_id, params.kind)
        if not imdb_id:
            raise SubtitleUnavailable(NO_EXTERNAL_ID)

        candidates = await self.search_subtitles(
            imdb_id, params.language, season=params.season, episode=params.episode
        )
        if not candidates:
            raise SubtitleUnavailable(NO_SUBTITLES)

        ranked = sort_candidates(candidates, params.sort)
        chosen_index = clamp_index(index, len(ranked))
        chosen = ranked[chosen_index]

        if not chosen.download_link:
            raise SubtitleUnavailable(NO_DOWNLOAD_LINK)

        srt_content = await self.download_subtitle(chosen.download_link)

        logger.info(
            f"Sous-titre {chosen_index + 1}/{len(ranked)} retenu pour "
            f"{params.kind.value}/{params.tmdb_id}: {chosen.release_name}"
        )
        return SubtitleResult.succeeded(
            srt_content=srt_content,
            total_available=len(ranked),
            current_index=chosen_index,
            release_name=chosen.release_name,
        )

    async def get_subtitles(
        self,
        params: SubtitleSearchParams,
        index: int = 0,
    ) -> SubtitleResult:
        """
        Resout un sous-titre de bout en bout.

        Args:
            params: Titre, langue, saison/episode et strategie de tri
            index: Rang du candidat voulu dans la liste triee (borne si hors limites)

        Returns:
            SubtitleResult en succes (texte, total, index, release) ou en echec (message)
        """
        try:
            return await self._resolve(params, index)
        except (SubtitleUnavailable, DownloadError) as e:
            logger.info(f"Pas de sous-titre pour {params.kind.value}/{params.tmdb_id}: {e}")
            return SubtitleResult.failed(str(e))
        except Exception as e:
            logger.exception(f"Erreur inattendue pendant la resolution des sous-titres: {e}")
            return SubtitleResult.failed(str(e) or UNKNOWN_ERROR)
