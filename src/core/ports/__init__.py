"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les services externes
- ICatalogProvider : Catalogue de films et séries (TMDB)
- ISubtitleProvider : Recherche et téléchargement de sous-titres (OpenSubtitles)

Ports stockage :
- ISavedItemsStore : Liste "My List" persistée
"""

from src.core.ports.api_clients import (
    ICatalogProvider,
    ISubtitleProvider,
)
from src.core.ports.saved_items import ISavedItemsStore

__all__ = [
    # Clients API
    "ICatalogProvider",
    "ISubtitleProvider",
    # Stockage
    "ISavedItemsStore",
]
