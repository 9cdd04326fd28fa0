"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour les fournisseurs
distants : TMDB pour le catalogue, OpenSubtitles pour les sous-titres.
Les implémentations lèvent ProviderError sur toute réponse non-2xx ou tout
échec de transport.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.catalog import (
    CatalogItem,
    CatalogKind,
    Credits,
    Details,
    FeedEndpoint,
    MovieDetails,
    SeasonDetails,
    SeriesDetails,
    Video,
)
from src.core.entities.subtitles import SubtitleCandidate


class ICatalogProvider(ABC):
    """
    Interface du fournisseur de métadonnées catalogue.

    Chaque méthode correspond à un endpoint ; les réponses sont validées et
    converties en entités à la frontière (pas de JSON brut en aval).
    """

    @abstractmethod
    async def get_feed(self, endpoint: FeedEndpoint) -> list[CatalogItem]:
        """Récupère les entrées (non filtrées) d'un endpoint de liste."""
        ...

    @abstractmethod
    async def get_movie(self, movie_id: int) -> MovieDetails:
        """Récupère la fiche complète d'un film."""
        ...

    @abstractmethod
    async def get_series(self, series_id: int) -> SeriesDetails:
        """Récupère la fiche complète d'une série."""
        ...

    async def get_details(self, kind: CatalogKind, item_id: int) -> Details:
        """Récupère la fiche selon le type."""
        if kind is CatalogKind.MOVIE:
            return await self.get_movie(item_id)
        return await self.get_series(item_id)

    @abstractmethod
    async def get_credits(self, kind: CatalogKind, item_id: int) -> Credits:
        ...

    @abstractmethod
    async def get_videos(self, kind: CatalogKind, item_id: int) -> list[Video]:
        ...

    @abstractmethod
    async def get_similar(self, kind: CatalogKind, item_id: int) -> list[CatalogItem]:
        ...

    @abstractmethod
    async def get_recommendations(self, kind: CatalogKind, item_id: int) -> list[CatalogItem]:
        ...

    @abstractmethod
    async def get_season(self, series_id: int, season_number: int) -> SeasonDetails:
        """Récupère une saison et ses épisodes."""
        ...

    @abstractmethod
    async def get_external_ids(self, kind: CatalogKind, item_id: int) -> dict[str, Optional[str]]:
        """Récupère les identifiants externes (IMDb, Wikidata, ...)."""
        ...

    @abstractmethod
    async def search_multi(self, query: str) -> list[CatalogItem]:
        """Recherche multi-types (films, séries, personnes)."""
        ...


class ISubtitleProvider(ABC):
    """Interface du fournisseur de sous-titres."""

    @abstractmethod
    async def search(self, path: str) -> list[SubtitleCandidate]:
        """
        Exécute une recherche par chemin de segments.

        Args :
            path : Chemin complet, ex: "/search/imdbid-1375666/sublanguageid-eng"

        Retourne :
            Candidats dans l'ordre natif du fournisseur
        """
        ...

    @abstractmethod
    async def download(self, url: str) -> bytes:
        """Télécharge un fichier de sous-titres (corps binaire brut)."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant de la source (ex: 'opensubtitles')."""
        ...

