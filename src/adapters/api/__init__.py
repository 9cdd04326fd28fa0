"""
Clients API externes du pipeline.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database pour le catalogue (accueil, fiches, saisons)
- OpenSubtitles: recherche et telechargement de sous-titres

Infrastructure partagee:
- ProviderClient: client httpx a configuration immuable, erreurs en ProviderError

Les clients implementent ICatalogProvider et ISubtitleProvider definis dans
core/ports/api_clients.py.
"""

from src.adapters.api.opensubtitles_client import OpenSubtitlesClient
from src.adapters.api.provider_client import ProviderClient
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "OpenSubtitlesClient",
    "ProviderClient",
    "TMDBClient",
]
