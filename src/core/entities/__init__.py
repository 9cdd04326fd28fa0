"""
Business entities representing core domain concepts.

Entities are immutable records built from provider payloads at the
ingestion boundary.

Exports:
- CatalogItem: A movie or series card
- Category: A titled row of items (placeholder or resolved)
- HomeModel: Hero plus categories for one tab
- DetailBundle: Details and facets for the detail screen
- SubtitleCandidate: One subtitle search result
- SubtitleResult: Tagged outcome of the subtitle pipeline
"""

from src.core.entities.catalog import (
    CatalogItem,
    CatalogKind,
    Category,
    DetailBundle,
    HomeModel,
    MediaTab,
    MovieDetails,
    SeasonDetails,
    SeriesDetails,
)
from src.core.entities.subtitles import (
    SortStrategy,
    SubtitleCandidate,
    SubtitleResult,
    SubtitleSearchParams,
)

__all__ = [
    "CatalogItem",
    "CatalogKind",
    "Category",
    "DetailBundle",
    "HomeModel",
    "MediaTab",
    "MovieDetails",
    "SeasonDetails",
    "SeriesDetails",
    "SortStrategy",
    "SubtitleCandidate",
    "SubtitleResult",
    "SubtitleSearchParams",
]
