"""
Client OpenSubtitles (API REST historique) pour la recherche de sous-titres.

Implemente ISubtitleProvider. La recherche se fait par chemin de segments
(/search/episode-N/imdbid-X/season-N/sublanguageid-L) ; les fichiers sont
telecharges en binaire (gzip) avec un timeout plus long que la recherche.
"""

from typing import Optional

from loguru import logger

from src.adapters.api.provider_client import ProviderClient
from src.core.entities.subtitles import SubtitleCandidate
from src.core.ports.api_clients import ISubtitleProvider


class OpenSubtitlesClient(ProviderClient, ISubtitleProvider):
    """
    Client API OpenSubtitles REST.

    Attributes:
        OPENSUBTITLES_API_URL: URL de base de l'API REST
        SEARCH_TIMEOUT: Timeout des recherches (secondes)
        DOWNLOAD_TIMEOUT: Timeout des telechargements binaires (secondes)

    Example:
        client = OpenSubtitlesClient(user_agent="LimeTV-v1.0")
        candidates = await client.search("/search/imdbid-1375666/sublanguageid-eng")
        payload = await client.download(candidates[0].download_link)
        await client.close()
    """

    OPENSUBTITLES_API_URL = "https://rest.opensubtitles.org"
    SEARCH_TIMEOUT = 15.0
    DOWNLOAD_TIMEOUT = 30.0

    def __init__(self, user_agent: str = "LimeTV-v1.0") -> None:
        """
        Initialise le client OpenSubtitles.

        Args:
            user_agent: Valeur de l'en-tete X-User-Agent enregistree aupres d'OpenSubtitles
        """
        super().__init__(
            base_url=self.OPENSUBTITLES_API_URL,
            headers={
                "X-User-Agent": user_agent,
                "Accept": "*/*",
                "Accept-Language": "en-US,en;q=0.9",
            },
            timeout=self.SEARCH_TIMEOUT,
        )

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "opensubtitles"

    async def search(self, path: str) -> list[SubtitleCandidate]:
        """
        Execute une recherche OpenSubtitles.

        Un corps qui n'est pas un tableau (l'API renvoie parfois un objet
        vide) est traite comme une absence de resultats.

        Raises:
            ProviderError: Echec HTTP ou de transport
        """
        data = await self.get_json(path)
        if not isinstance(data, list):
            logger.debug(f"Recherche {path}: reponse non tableau, aucun resultat")
            return []
        return [SubtitleCandidate.from_payload(entry) for entry in data if isinstance(entry, dict)]

    async def download(self, url: str, timeout: Optional[float] = None) -> bytes:
        """
        Telecharge un fichier de sous-titres.

        Args:
            url: Lien de telechargement (URL absolue retournee par la recherche)
            timeout: Timeout specifique, DOWNLOAD_TIMEOUT par defaut

        Returns:
            Corps brut (normalement compresse en gzip)
        """
        return await self.get_bytes(url, timeout=timeout or self.DOWNLOAD_TIMEOUT)
